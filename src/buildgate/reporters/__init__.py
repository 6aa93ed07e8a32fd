"""Hook report renderers for BuildGate."""

from buildgate.reporters.json_reporter import JSONReporter
from buildgate.reporters.markdown_reporter import MarkdownReporter

REPORTERS = {
    "json": (JSONReporter, "report.json"),
    "markdown": (MarkdownReporter, "report.md"),
}

__all__ = ["JSONReporter", "MarkdownReporter", "REPORTERS"]
