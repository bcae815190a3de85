"""
Lint runs: validate every source designated by the command line.

Results keep the order in which sources were discovered so reports are
deterministic.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from .config import LintConfig
from .engine import ValidationEngine
from .models import ValidationResult
from .sources import find_yaml_files, read_source, read_stdin

logger = logging.getLogger(__name__)


def lint_file(
    path: Path,
    engine: ValidationEngine,
    allow_custom_tags: bool = False,
) -> ValidationResult:
    """
    Validate one file.

    Files that cannot be read or decoded produce an invalid result rather
    than aborting the run.
    """
    source_id = str(path)
    try:
        content = read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Unable to read %s: %s", source_id, e)
        return ValidationResult.failed(source_id, f"Unable to read file: {e}")
    return engine.validate(content, source_id=source_id, allow_custom_tags=allow_custom_tags)


def lint_paths(
    paths: Iterable[Union[str, Path]],
    config: Optional[LintConfig] = None,
    engine: Optional[ValidationEngine] = None,
) -> List[ValidationResult]:
    """
    Lint files and directories.

    Args:
        paths: Files or directories to lint
        config: Lint configuration (defaults if omitted)
        engine: Validation engine to reuse

    Returns:
        One ValidationResult per discovered file

    Raises:
        SourceError: If a path does not exist
    """
    config = config or LintConfig()
    engine = engine or ValidationEngine()

    results = []
    for path in paths:
        for yaml_file in find_yaml_files(Path(path), config.extensions, config.exclude):
            results.append(lint_file(yaml_file, engine, config.parse_tags))
    return results


def lint_stdin(
    stream: TextIO,
    config: Optional[LintConfig] = None,
    engine: Optional[ValidationEngine] = None,
) -> List[ValidationResult]:
    """
    Lint a single document read from STDIN.

    Raises:
        SourceError: If STDIN is an interactive terminal
    """
    config = config or LintConfig()
    engine = engine or ValidationEngine()

    content = read_stdin(stream)
    return [engine.validate(content, source_id=None, allow_custom_tags=config.parse_tags)]
