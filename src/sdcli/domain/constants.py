from __future__ import annotations

"""
Domain Constants.

Centralizes the names of environment variables, directory conventions and
annotation markers shared by the builder, the dispatcher and the CLI.
"""

# -----------------------------------------------------------------------------
# PROGRAM IDENTITY
# -----------------------------------------------------------------------------

DEFAULT_ALIAS = "sd"

# -----------------------------------------------------------------------------
# ROOT DIRECTORIES
# -----------------------------------------------------------------------------

HOME_SCRIPTS_DIR = ".sd"
CWD_SCRIPTS_DIR = "scripts"
README_NAME = "README"
HIDDEN_PREFIX = "."

# -----------------------------------------------------------------------------
# ENVIRONMENT VARIABLES
# -----------------------------------------------------------------------------

ENV_HOME = "HOME"
ENV_SD_PATH = "SD_PATH"
ENV_LOG_FILE = "SD_LOG_FILE"
ENV_VISUAL = "VISUAL"
ENV_EDITOR = "EDITOR"

# Produced for executed scripts
ENV_ALIAS = "SD_ALIAS"
ENV_DEBUG = "DEBUG"
DEBUG_VALUE = "true"

# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

SHELL_PATH = "/bin/sh"
SHELL_NAME = "sh"
# Resolved by the shell when neither VISUAL nor EDITOR is set
FALLBACK_EDITOR = "$(which vim)"

# -----------------------------------------------------------------------------
# USAGE GRAMMAR
# -----------------------------------------------------------------------------

UNBOUNDED_MARKER = "..."
OPTIONAL_OPEN = "["
OPTIONAL_CLOSE = "]"
