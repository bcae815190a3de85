"""
Validation engine.

Turns one (content, source) pair into exactly one ValidationResult. This is
the recovery boundary of the linter: parser failures are converted into
data here and never propagate to the caller.
"""

import logging
from typing import Optional

from .errors import ParseFailure
from .models import ValidationResult
from .parser import ParserAdapter

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Validates YAML sources through a ParserAdapter.

    Example usage:
        engine = ValidationEngine()
        result = engine.validate("a: [1, 2", source_id="config.yaml")
        if not result.valid:
            print(f"{result.source_id}:{result.line}: {result.message}")
    """

    def __init__(self, adapter: Optional[ParserAdapter] = None):
        self.adapter = adapter or ParserAdapter()

    def validate(
        self,
        content: str,
        source_id: Optional[str] = None,
        allow_custom_tags: bool = False,
    ) -> ValidationResult:
        """
        Validate the syntax of one source.

        Args:
            content: Full text of the source
            source_id: File path, or None for STDIN
            allow_custom_tags: Accept application-defined tags

        Returns:
            ValidationResult for the source
        """
        try:
            self.adapter.validate_document(
                content,
                allow_custom_tags=allow_custom_tags,
                name=source_id,
            )
        except ParseFailure as e:
            logger.debug("Invalid: %s (line %s): %s", source_id or "STDIN", e.line, e.message)
            return ValidationResult.failed(source_id, e.message, line=e.line)

        logger.debug("Valid: %s", source_id or "STDIN")
        return ValidationResult.ok(source_id)


def validate(
    content: str,
    source_id: Optional[str] = None,
    allow_custom_tags: bool = False,
) -> ValidationResult:
    """Validate one source with a fresh engine (no state shared between calls)."""
    return ValidationEngine().validate(content, source_id, allow_custom_tags)
