"""Locating and reading YAML sources (files, directories, STDIN)."""

import fnmatch
import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .constants import DEFAULT_EXTENSIONS
from .errors import SourceError

logger = logging.getLogger(__name__)


def is_excluded(path: Path, patterns: Iterable[str], root: Optional[Path] = None) -> bool:
    """
    Check a path against glob patterns.

    A pattern matches the full path, the basename, or (when ``root`` is
    given) the path relative to the linted directory, so ``vendor/*``
    excludes ``<root>/vendor/x.yaml``.
    """
    names = [path.as_posix(), path.name]
    if root is not None:
        names.append(path.relative_to(root).as_posix())
    return any(fnmatch.fnmatch(name, pattern) for pattern in patterns for name in names)


def find_yaml_files(
    path: Path,
    extensions: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
) -> List[Path]:
    """
    Resolve a path argument to the YAML files it designates.

    A file is returned as-is, whatever its suffix. A directory is searched
    recursively for files with a matching suffix, in sorted order.

    Args:
        path: File or directory
        extensions: Suffixes to search for (default: .yaml, .yml)
        exclude: Glob patterns for files to skip in directories

    Raises:
        SourceError: If the path does not exist
    """
    extensions = [ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)]
    exclude = exclude or []

    if path.is_file():
        return [path]
    if not path.is_dir():
        raise SourceError(f'File or directory "{path}" is not readable.')

    yaml_files = []
    for candidate in sorted(path.rglob("*")):
        if not candidate.is_file() or candidate.suffix.lower() not in extensions:
            continue
        if is_excluded(candidate, exclude, root=path):
            logger.debug("Excluded %s", candidate)
            continue
        yaml_files.append(candidate)

    logger.debug("Found %d YAML file(s) under %s", len(yaml_files), path)
    return yaml_files


def read_source(path: Path) -> str:
    """
    Read a source file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    return path.read_text(encoding="utf-8")


def read_stdin(stream: TextIO) -> str:
    """
    Read one document from STDIN.

    Raises:
        SourceError: If STDIN is an interactive terminal
    """
    if stream.isatty():
        raise SourceError("Please provide a filename or pipe file content to STDIN.")
    return stream.read()
