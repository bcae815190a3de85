"""Exception types raised by yaml-lint."""

from typing import Optional


class LintError(Exception):
    """Base class for all yaml-lint errors."""


class ParseFailure(LintError):
    """
    A YAML document could not be parsed.

    Attributes:
        message: Parser error message
        line: 1-based line where parsing failed, or None if unknown
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line


class DeprecationPromotedError(ParseFailure):
    """A deprecation warning emitted while parsing, treated as an error."""


class SourceError(LintError):
    """Input could not be obtained (missing path, interactive STDIN, bad config)."""
