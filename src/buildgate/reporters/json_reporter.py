"""JSON hook reporter for BuildGate."""

from __future__ import annotations

import json
from pathlib import Path

from buildgate.models import HookReport


class JSONReporter:
    """Serialize a HookReport to JSON format."""

    def render(self, report: HookReport) -> str:
        """Render the report as a JSON string.

        Args:
            report: The hook report to serialize.

        Returns:
            A formatted JSON string.
        """
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)

    def write(self, report: HookReport, output_path: str | Path) -> None:
        """Write the report to a JSON file, creating parent directories."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(report), encoding="utf-8")
