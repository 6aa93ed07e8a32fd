"""Markdown hook reporter for BuildGate."""

from __future__ import annotations

from pathlib import Path

from buildgate.models import HookReport, HookStatus

_STATUS_EMOJI = {
    HookStatus.PASS: "✅",
    HookStatus.FAIL: "🚫",
    HookStatus.NOT_FOUND: "❓",
    HookStatus.TIMEOUT: "⏱️",
}


class MarkdownReporter:
    """Render a HookReport as a Markdown summary (e.g. for CI job summaries)."""

    def render(self, report: HookReport) -> str:
        emoji = _STATUS_EMOJI.get(report.status, "")
        exit_code = "n/a" if report.returncode is None else str(report.returncode)
        lines = [
            "# BuildGate Pre-commit Check",
            "",
            f"**Status:** {emoji} {report.status.value}",
            "",
            "| Field | Value |",
            "|-------|-------|",
            f"| Command | `{report.command_line}` |",
            f"| Exit code | {exit_code} |",
            f"| Duration | {report.duration:.2f}s |",
            f"| Timestamp | {report.timestamp} |",
            "",
            f"> {report.message}",
        ]

        for title, text in (("stdout", report.stdout), ("stderr", report.stderr)):
            if text.strip():
                lines.extend(["", f"## {title}", "", "```text", text.rstrip("\n"), "```"])

        return "\n".join(lines) + "\n"

    def write(self, report: HookReport, output_path: str | Path) -> None:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(report), encoding="utf-8")
