"""
yaml-lint: YAML syntax validation with structured error reporting.

This package validates YAML syntax in files, directories, or STDIN and
reports parse errors with file and line context. It supports:

- Strict linting: deprecation warnings raised while parsing (such as
  duplicate mapping keys) are reported as errors
- Custom tags: optionally accept application-defined tags like ``!env``
- Text and JSON reports: human-readable or machine-parseable output
- Binary exit status: 0 when every source is valid, 1 otherwise

Quick Start:
    from yaml_lint import ValidationEngine, summarize, get_formatter

    engine = ValidationEngine()
    results = [
        engine.validate('{"a": 1, "e": 5}', source_id="good.yaml"),
        engine.validate("a: [1, 2", source_id="bad.yaml"),
    ]

    summary, exit_code = summarize(results)
    print(get_formatter("txt").render(results, summary))

Linting paths:
    from yaml_lint import lint_paths, load_config

    config = load_config({"parse_tags": True})
    results = lint_paths(["config/"], config)
"""

__version__ = "0.1.0"

# Model exports
from .models import TaggedValue, ValidationResult, ValidationSummary

# Error exports
from .errors import DeprecationPromotedError, LintError, ParseFailure, SourceError

# Parser and engine exports
from .parser import ParserAdapter
from .engine import ValidationEngine, validate
from .aggregator import summarize

# Reporter exports
from .reporter import (
    JsonFormatter,
    OutputFormat,
    ReportFormatter,
    TextFormatter,
    get_formatter,
)

# Configuration exports
from .config import LintConfig, find_config_file, load_config

# Run exports
from .linter import lint_file, lint_paths, lint_stdin

__all__ = [
    # Version
    "__version__",
    # Models
    "ValidationResult",
    "ValidationSummary",
    "TaggedValue",
    # Errors
    "LintError",
    "ParseFailure",
    "DeprecationPromotedError",
    "SourceError",
    # Validation
    "ParserAdapter",
    "ValidationEngine",
    "validate",
    "summarize",
    # Reporter
    "ReportFormatter",
    "TextFormatter",
    "JsonFormatter",
    "OutputFormat",
    "get_formatter",
    # Config
    "LintConfig",
    "load_config",
    "find_config_file",
    # Runs
    "lint_file",
    "lint_paths",
    "lint_stdin",
]
