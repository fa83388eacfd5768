from __future__ import annotations

"""
Configuration Domain.

Resolves the environment-driven settings of a single invocation and holds
the process-wide runtime flags. Both are immutable once created.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from sdcli.domain.constants import DEFAULT_ALIAS, ENV_HOME, ENV_LOG_FILE, ENV_SD_PATH

# -----------------------------------------------------------------------------
# RUNTIME FLAGS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RuntimeFlags:
    """
    Process-wide flags for one invocation.

    Attributes:
        alias: Displayed program identity.
        debug: Raise logging verbosity and export DEBUG to scripts.
        edit: Open the script in an editor instead of running it.
    """
    alias: str = DEFAULT_ALIAS
    debug: bool = False
    edit: bool = False

# -----------------------------------------------------------------------------
# SETTINGS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Settings:
    """
    Environment snapshot used to locate script roots and log output.

    Attributes:
        home: User home directory.
        cwd: Current working directory.
        sd_path: Raw value of SD_PATH (platform path-list syntax).
        log_file: Optional path of a persistent log file.
    """
    home: str
    cwd: str
    sd_path: str = ""
    log_file: Optional[str] = None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read the settings of the current process.

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Settings: Resolved settings.
    """
    env = os.environ if environ is None else environ
    home = env.get(ENV_HOME) or os.path.expanduser("~")
    return Settings(
        home=home,
        cwd=os.getcwd(),
        sd_path=env.get(ENV_SD_PATH, ""),
        log_file=env.get(ENV_LOG_FILE) or None,
    )
