"""
Configuration handling for yaml-lint.

Settings can come from a YAML file, a dictionary, or the command line.
Command-line flags override file settings.

Example YAML configuration (.yaml-lint.yaml):
    format: txt
    parse_tags: true
    verbose: false
    extensions:
      - .yaml
      - .yml
    exclude:
      - "vendor/*"
      - "*.generated.yaml"

Example usage:
    from yaml_lint.config import load_config

    config = load_config(".yaml-lint.yaml")
    config = config.merged(format="json")
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .constants import CONFIG_FILE_CANDIDATES, DEFAULT_EXTENSIONS
from .reporter import OutputFormat

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"format", "parse_tags", "verbose", "extensions", "exclude"}


def _parse_format(value: Union[str, OutputFormat]) -> OutputFormat:
    """Parse format string to OutputFormat enum."""
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(str(value).lower())
    except ValueError:
        raise ValueError(f"Invalid format: {value}. Must be txt or json.") from None


def _parse_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean, got {value!r}")
    return value


def _parse_str_list(key: str, value: Any) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"'{key}' must be a list of strings, got {value!r}")
    return list(value)


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


class LintConfig:
    """
    Configuration container for a lint run.

    Attributes:
        format: Report output format
        parse_tags: Accept application-defined YAML tags
        verbose: Display valid files in the text report
        extensions: File suffixes searched for in directories
        exclude: Glob patterns for files skipped during directory traversal
    """

    def __init__(
        self,
        format: Union[str, OutputFormat] = OutputFormat.TXT,
        parse_tags: bool = False,
        verbose: bool = False,
        extensions: Optional[List[str]] = None,
        exclude: Optional[List[str]] = None,
    ):
        self.format = _parse_format(format)
        self.parse_tags = parse_tags
        self.verbose = verbose
        self.extensions = [
            _normalize_extension(ext) for ext in (extensions or DEFAULT_EXTENSIONS)
        ]
        self.exclude = list(exclude or [])

    def __repr__(self) -> str:
        return (
            f"LintConfig(format={self.format.value!r}, parse_tags={self.parse_tags}, "
            f"verbose={self.verbose}, extensions={self.extensions}, exclude={self.exclude})"
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LintConfig":
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            LintConfig instance

        Raises:
            ValueError: If the dictionary has unknown keys or invalid values
        """
        unknown = set(data) - KNOWN_KEYS
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        if "format" in data:
            kwargs["format"] = _parse_format(data["format"])
        for key in ("parse_tags", "verbose"):
            if key in data:
                kwargs[key] = _parse_bool(key, data[key])
        for key in ("extensions", "exclude"):
            if key in data:
                kwargs[key] = _parse_str_list(key, data[key])

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "LintConfig":
        """
        Load configuration from a YAML file.

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or has invalid settings
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        logger.debug("Loaded configuration from %s", path)
        return cls.from_dict(data)

    def merged(self, **overrides: Any) -> "LintConfig":
        """
        Return a copy with the given settings replaced.

        Overrides set to None are ignored, so unset command-line flags keep
        the configured value.
        """
        values: Dict[str, Any] = {
            "format": self.format,
            "parse_tags": self.parse_tags,
            "verbose": self.verbose,
            "extensions": self.extensions,
            "exclude": self.exclude,
        }
        for key, value in overrides.items():
            if key not in values:
                raise ValueError(f"Unknown configuration key: {key}")
            if value is not None:
                values[key] = value
        return LintConfig(**values)


def find_config_file(directory: Optional[Path] = None) -> Optional[Path]:
    """Find a yaml-lint configuration file in common locations."""
    base = directory or Path.cwd()
    for name in CONFIG_FILE_CANDIDATES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def load_config(source: Union[str, Path, Dict[str, Any], None] = None) -> LintConfig:
    """
    Load configuration from various sources.

    Convenience function that accepts:
    - Path to YAML file (str or Path)
    - Configuration dictionary
    - None: use a discovered config file, or defaults if there is none

    Args:
        source: Configuration source

    Returns:
        LintConfig instance
    """
    if isinstance(source, dict):
        return LintConfig.from_dict(source)
    if source is None:
        found = find_config_file()
        if found is None:
            return LintConfig()
        return LintConfig.from_yaml(found)
    return LintConfig.from_yaml(source)
