# src/podlint/cli/formatter.py
import json
from typing import Any, Dict, List

from rich.console import Console

from podlint.core.engine import LintReport
from podlint.core.models import Known, Violation

# stdout carries the violations, stderr carries system-level failures
console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)


def render_violation(file_name: str, violation: Violation) -> str:
    """
    `<file>:<line> <message>` when the line is known, `<file>: <message>`
    when the field is absent from its parent.
    """
    if isinstance(violation.position, Known):
        return f"{file_name}:{violation.position.line} {violation.message}"
    return f"{file_name}: {violation.message}"


class ReportFormatter:
    """
    ReportFormatter: renders lint reports for the terminal.
    Plain text lines are the contract downstream tooling parses; json is
    the machine-readable alternative.
    """

    FORMATS = ("text", "json")

    def __init__(self, output_format: str = "text"):
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format '{output_format}'")
        self.output_format = output_format

    def text_lines(self, report: LintReport) -> List[str]:
        return [render_violation(report.file_name, v) for v in report.violations]

    def as_dict(self, report: LintReport) -> Dict[str, Any]:
        return {
            "file": report.file_name,
            "policy": report.policy,
            "errors": len(report.violations),
            "violations": [
                {"line": v.line, "message": v.message}
                for v in report.violations
            ],
        }

    def print_report(self, report: LintReport):
        if self.output_format == "json":
            self._emit(json.dumps(self.as_dict(report), indent=2))
            return
        for line in self.text_lines(report):
            self._emit(line)

    def print_system_error(self, file_name: str, reason: str):
        error_console.print(f"{file_name}: {reason}", markup=False, highlight=False, emoji=False)

    def _emit(self, text: str):
        # Messages echo user values verbatim; no markup/emoji interpretation
        console.print(text, markup=False, highlight=False, emoji=False)
