"""
Report rendering for yaml-lint.

Two output formats are supported:
- txt: Human-readable lines, one per source, followed by a summary banner
- json: Array of per-source result objects for CI integration

Formatters are pure: they return the rendered report as a string and leave
writing it to the caller.

Example usage:
    from yaml_lint.aggregator import summarize
    from yaml_lint.reporter import OutputFormat, get_formatter

    summary, exit_code = summarize(results)
    formatter = get_formatter(OutputFormat.TXT)
    print(formatter.render(results, summary, display_correct_files=True))
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Sequence, Union

from .models import ValidationResult, ValidationSummary


class OutputFormat(Enum):
    """Report output format."""
    TXT = "txt"
    JSON = "json"


class ReportFormatter(ABC):
    """Renders validation results and their summary."""

    @abstractmethod
    def render(
        self,
        results: Sequence[ValidationResult],
        summary: ValidationSummary,
        display_correct_files: bool = False,
    ) -> str:
        """
        Render a report.

        Args:
            results: Validation results in display order
            summary: Summary computed from the same results
            display_correct_files: Include lines for valid sources

        Returns:
            Rendered report
        """


def _source_suffix(result: ValidationResult) -> str:
    return f" in {result.source_id}" if result.source_id is not None else ""


class TextFormatter(ReportFormatter):
    """Plain-text report with an OK/ERROR line per source and a summary banner."""

    def render_lines(
        self,
        results: Sequence[ValidationResult],
        summary: ValidationSummary,
        display_correct_files: bool = False,
    ) -> List[str]:
        lines: List[str] = []
        for result in results:
            if result.valid:
                if display_correct_files:
                    lines.append(f"OK{_source_suffix(result)}")
            else:
                lines.append(f"ERROR{_source_suffix(result)}")
                lines.append(f" >> {result.message}")

        lines.append(self.summary_line(summary))
        return lines

    @staticmethod
    def summary_line(summary: ValidationSummary) -> str:
        if summary.errored == 0:
            return f"[OK] All {summary.total} YAML files contain valid syntax."
        return (
            f"[WARNING] {summary.valid_count} YAML files have valid syntax "
            f"and {summary.errored} contain errors."
        )

    def render(
        self,
        results: Sequence[ValidationResult],
        summary: ValidationSummary,
        display_correct_files: bool = False,
    ) -> str:
        return "\n".join(self.render_lines(results, summary, display_correct_files)) + "\n"


class JsonFormatter(ReportFormatter):
    """
    JSON array report, one object per source.

    Every object has ``file`` (null for STDIN) and ``valid``; ``line`` and
    ``message`` appear only for invalid sources. The summary is implied by the
    array and is not rendered. Correct files are always included.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(
        self,
        results: Sequence[ValidationResult],
        summary: ValidationSummary,
        display_correct_files: bool = False,
    ) -> str:
        data = [result.to_dict() for result in results]
        return json.dumps(data, indent=self.indent) + "\n"


_FORMATTERS = {
    OutputFormat.TXT: TextFormatter,
    OutputFormat.JSON: JsonFormatter,
}


def get_formatter(fmt: Union[OutputFormat, str]) -> ReportFormatter:
    """
    Get the formatter for an output format.

    Args:
        fmt: OutputFormat or its string value ('txt' or 'json')

    Raises:
        ValueError: If the format is not supported
    """
    if isinstance(fmt, str):
        try:
            fmt = OutputFormat(fmt.lower())
        except ValueError:
            raise ValueError(f"Invalid format: {fmt}. Must be txt or json.") from None
    return _FORMATTERS[fmt]()
