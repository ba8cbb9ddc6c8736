"""Shared constants for workspace build resolution."""

# Per-member persisted settings
SETTINGS_DIR = ".settings"
SETTINGS_FILE = "build.json"

# Optional workspace manifest at the workspace root
WORKSPACE_MANIFEST = "workspace.json"

# Environment variable consulted by the CLI for the workspace root
WORKSPACE_ROOT_ENV = "WORKSPACE_BUILDS_ROOT"

# Settings defaults
DEFAULT_DISTRIBUTION = "wrapper"
DEFAULT_SHOW_CONSOLE_VIEW = True
DEFAULT_SHOW_EXECUTIONS_VIEW = True

# Prefix for verbose output
LOG_PREFIX = "[builds]"
