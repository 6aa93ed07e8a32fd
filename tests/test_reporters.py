"""Tests for the JSON and Markdown reporters."""

import json

import pytest

from buildgate.models import HookReport, HookStatus
from buildgate.reporters import REPORTERS, JSONReporter, MarkdownReporter


@pytest.fixture
def failed_report():
    return HookReport(
        status=HookStatus.FAIL,
        command=["cargo", "check"],
        timestamp="2024-01-01T00:00:00+00:00",
        message="command failed with exit code 101: cargo check",
        returncode=101,
        stdout="",
        stderr="error[E0425]: cannot find value `x` in this scope\n",
        duration=3.21,
    )


@pytest.fixture
def passed_report():
    return HookReport(
        status=HookStatus.PASS,
        command=["cargo", "check"],
        timestamp="2024-01-01T00:00:00+00:00",
        message="build check passed",
        returncode=0,
        duration=0.5,
    )


class TestJSONReporter:
    def test_render_is_valid_json(self, failed_report):
        data = json.loads(JSONReporter().render(failed_report))
        assert data["status"] == "FAIL"
        assert data["returncode"] == 101
        assert data["command"] == ["cargo", "check"]
        assert "E0425" in data["stderr"]

    def test_not_found_has_null_returncode(self):
        report = HookReport(
            status=HookStatus.NOT_FOUND,
            command=["cargo", "check"],
            timestamp="2024-01-01T00:00:00+00:00",
            message="command not found: cargo",
        )
        data = json.loads(JSONReporter().render(report))
        assert data["status"] == "NOT_FOUND"
        assert data["returncode"] is None

    def test_write_creates_directories(self, tmp_path, passed_report):
        out = tmp_path / "nested" / "dir" / "report.json"
        JSONReporter().write(passed_report, out)
        assert json.loads(out.read_text())["status"] == "PASS"


class TestMarkdownReporter:
    def test_render_failure(self, failed_report):
        md = MarkdownReporter().render(failed_report)
        assert "# BuildGate Pre-commit Check" in md
        assert "FAIL" in md
        assert "`cargo check`" in md
        assert "| Exit code | 101 |" in md
        assert "## stderr" in md
        assert "E0425" in md

    def test_render_pass_omits_empty_output_sections(self, passed_report):
        md = MarkdownReporter().render(passed_report)
        assert "PASS" in md
        assert "## stdout" not in md
        assert "## stderr" not in md

    def test_write(self, tmp_path, failed_report):
        out = tmp_path / "reports" / "report.md"
        MarkdownReporter().write(failed_report, str(out))
        assert "FAIL" in out.read_text(encoding="utf-8")


class TestRegistry:
    def test_registry_maps_formats_to_files(self):
        assert REPORTERS["json"] == (JSONReporter, "report.json")
        assert REPORTERS["markdown"] == (MarkdownReporter, "report.md")
