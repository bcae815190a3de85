"""Aggregation of per-source results into a summary and exit code."""

from typing import Iterable, Tuple

from .constants import EXIT_SUCCESS, EXIT_VALIDATION_FAILED
from .models import ValidationResult, ValidationSummary


def summarize(results: Iterable[ValidationResult]) -> Tuple[ValidationSummary, int]:
    """
    Reduce validation results to a summary and a process exit code.

    The exit code is binary: 0 when every source is valid, 1 otherwise,
    regardless of how many sources failed.

    Args:
        results: Validation results for every source in the run

    Returns:
        Tuple of (summary, exit_code)
    """
    total = 0
    errored = 0
    for result in results:
        total += 1
        if not result.valid:
            errored += 1

    summary = ValidationSummary(total=total, errored=errored)
    exit_code = EXIT_VALIDATION_FAILED if errored else EXIT_SUCCESS
    return summary, exit_code
