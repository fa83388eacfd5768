from __future__ import annotations

"""
Alias/Debug Front-End.

The program identity shows up in every help and usage text, and debug
logging must be active while the command tree is being built. Both are
therefore read from the raw argument list before argparse ever runs.
"""

from typing import Optional, Sequence

from sdcli.domain.config import RuntimeFlags
from sdcli.domain.constants import DEFAULT_ALIAS

ALIAS_FLAGS = ("-a", "--alias")
DEBUG_FLAGS = ("-d", "--debug")
EDIT_FLAGS = ("-e", "--edit")


def scan_alias(argv: Sequence[str]) -> str:
    """
    Find the alias flag by hand; the last occurrence wins.

    Accepts '-a NAME', '-aNAME', '--alias NAME' and '--alias=NAME'. When the
    deciding occurrence has an empty value, or no value at all, the default
    identity is used.

    Args:
        argv: Raw process arguments, program name excluded.

    Returns:
        str: Displayed program identity.
    """
    value: Optional[str] = None
    found = False
    args = list(argv)

    for i, arg in enumerate(args):
        if arg == "--":
            break
        if arg in ALIAS_FLAGS:
            found = True
            value = args[i + 1] if i + 1 < len(args) else None
        elif arg.startswith("--alias="):
            found = True
            value = arg[len("--alias="):]
        elif arg.startswith("-a") and not arg.startswith("--"):
            found = True
            value = arg[2:]

    if not found or not value:
        return DEFAULT_ALIAS
    return value


def scan_debug(argv: Sequence[str]) -> bool:
    """Presence check for the debug flag anywhere in the arguments."""
    return any(arg in DEBUG_FLAGS for arg in argv)


def scan_runtime_flags(argv: Sequence[str]) -> RuntimeFlags:
    """
    Pre-scan the raw arguments into RuntimeFlags.

    The edit flag is left to argparse and filled in at dispatch time.
    """
    return RuntimeFlags(alias=scan_alias(argv), debug=scan_debug(argv))
