"""
Command-line interface for yaml-lint.

Usage:
    yaml-lint config.yaml                 # Lint one file
    yaml-lint config/                     # Lint every *.yaml/*.yml file under a directory
    cat config.yaml | yaml-lint           # Lint STDIN
    yaml-lint config/ --format=json       # Machine-readable report
    yaml-lint config/ --parse-tags        # Accept custom tags such as !env
    yaml-lint config/ -v                  # Also list files with valid syntax
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .aggregator import summarize
from .config import LintConfig, load_config
from .constants import EXIT_FATAL_ERROR
from .errors import SourceError
from .linter import lint_paths, lint_stdin
from .reporter import OutputFormat, get_formatter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaml-lint",
        description="Lints a YAML file and outputs encountered errors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0 - All sources contain valid syntax
  1 - At least one source contains errors
  2 - Fatal error (unreadable path, interactive STDIN, invalid config)
        """,
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="A file or a directory or STDIN.",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="The output format (default: txt)",
    )
    parser.add_argument(
        "--parse-tags",
        action="store_true",
        default=None,
        help="Parse custom tags",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Also display files with valid syntax",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Glob pattern of files to skip in directories (repeatable)",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"yaml-lint {__version__}",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> LintConfig:
    """Load the configuration file and apply command-line overrides."""
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        raise SourceError(str(e)) from e

    exclude = None
    if args.exclude:
        exclude = config.exclude + args.exclude

    return config.merged(
        format=OutputFormat(args.format) if args.format else None,
        parse_tags=args.parse_tags,
        verbose=args.verbose,
        exclude=exclude,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
        logger.debug("Using %r", config)

        if args.filename is not None:
            results = lint_paths([args.filename], config)
        else:
            results = lint_stdin(sys.stdin, config)
    except SourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FATAL_ERROR

    summary, exit_code = summarize(results)
    formatter = get_formatter(config.format)
    sys.stdout.write(formatter.render(results, summary, display_correct_files=config.verbose))

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
