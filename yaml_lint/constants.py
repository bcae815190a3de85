"""Constants shared across yaml-lint."""

DEFAULT_EXTENSIONS = [".yaml", ".yml"]

CONFIG_FILE_CANDIDATES = [
    ".yaml-lint.yaml",
    ".yaml-lint.yml",
    "yaml-lint.yaml",
    "yaml-lint.yml",
]

# Exit codes per contract
EXIT_SUCCESS = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FATAL_ERROR = 2
