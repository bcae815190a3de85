"""
Data model for yaml-lint.

Results are immutable: one ValidationResult is created per source as soon
as it has been validated, then handed to the aggregator and the reporters.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a single source.

    Attributes:
        source_id: File path of the source, or None for STDIN
        valid: True if the source parsed without errors
        line: 1-based line of the error (only for invalid sources, if known)
        message: Parser error message (only for invalid sources)
    """
    source_id: Optional[str]
    valid: bool
    line: Optional[int] = None
    message: Optional[str] = None

    def __post_init__(self):
        """Validate result invariants."""
        if self.valid:
            if self.line is not None or self.message is not None:
                raise ValueError("A valid result cannot carry a line or message")
        elif self.message is None:
            raise ValueError("An invalid result requires a message")
        if self.line is not None and self.line < 1:
            raise ValueError(f"line must be 1-based, got {self.line}")

    @classmethod
    def ok(cls, source_id: Optional[str] = None) -> "ValidationResult":
        """Build a result for a source with valid syntax."""
        return cls(source_id=source_id, valid=True)

    @classmethod
    def failed(
        cls,
        source_id: Optional[str],
        message: str,
        line: Optional[int] = None,
    ) -> "ValidationResult":
        """Build a result for a source that failed to parse."""
        return cls(source_id=source_id, valid=False, line=line, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        ``file`` and ``valid`` are always present (``file`` is None for STDIN);
        ``line`` and ``message`` are omitted when absent.
        """
        data: Dict[str, Any] = {"file": self.source_id, "valid": self.valid}
        if self.line is not None:
            data["line"] = self.line
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class ValidationSummary:
    """Aggregate counts for a lint run."""
    total: int
    errored: int

    def __post_init__(self):
        if not 0 <= self.errored <= self.total:
            raise ValueError(
                f"errored must be between 0 and total ({self.total}), got {self.errored}"
            )

    @property
    def valid_count(self) -> int:
        return self.total - self.errored


@dataclass(frozen=True)
class TaggedValue:
    """A node carrying an application-defined tag, e.g. ``!env HOME``."""
    tag: str
    value: Any
