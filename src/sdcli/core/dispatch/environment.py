from __future__ import annotations

"""
Process Environment Capability and Synthesis.

The dispatcher never touches os.environ directly: it reads variables
through an Environment object so tests can substitute their own.
"""

import os
from typing import Dict, Mapping, Optional

from sdcli.domain.config import RuntimeFlags
from sdcli.domain.constants import DEBUG_VALUE, ENV_ALIAS, ENV_DEBUG

# -----------------------------------------------------------------------------
# CAPABILITY
# -----------------------------------------------------------------------------

class Environment:
    """Read access to a set of environment variables."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> str:
        """Value of a variable, empty string when unset."""
        return self._values.get(key, "")

    def snapshot(self) -> Dict[str, str]:
        """Independent copy of every variable."""
        return dict(self._values)


class OsEnvironment(Environment):
    """Live view of the current process environment."""

    def __init__(self) -> None:
        super().__init__()

    def get(self, key: str) -> str:
        return os.environ.get(key, "")

    def snapshot(self) -> Dict[str, str]:
        return dict(os.environ)

# -----------------------------------------------------------------------------
# SYNTHESIS
# -----------------------------------------------------------------------------

def synthesize_environment(base: Mapping[str, str], flags: RuntimeFlags) -> Dict[str, str]:
    """
    Build the environment handed to an executed script.

    Args:
        base: Inherited environment.
        flags: Runtime flags of the invocation.

    Returns:
        Dict[str, str]: base + SD_ALIAS, + DEBUG=true in debug mode only.
    """
    env = dict(base)
    env[ENV_ALIAS] = flags.alias
    if flags.debug:
        env[ENV_DEBUG] = DEBUG_VALUE
    return env
