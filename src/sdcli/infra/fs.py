from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin predicates over 'os' and 'stat' used by the tree builder. Entries are
inspected with lstat so symbolic links are never mistaken for the file or
directory they point to.
"""

import os
import stat
from typing import Iterator, List

from sdcli.domain.constants import HIDDEN_PREFIX

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

def is_hidden(name: str) -> bool:
    """Names starting with a dot are invisible to traversal."""
    return name.startswith(HIDDEN_PREFIX)


def is_real_directory(path: str) -> bool:
    """True for a directory that is not a symlink."""
    return stat.S_ISDIR(os.lstat(path).st_mode)


def is_executable_file(path: str) -> bool:
    """
    True for a regular file (not a symlink) with the owner execute bit set.

    Args:
        path: Entry to inspect.

    Returns:
        bool: Eligibility as a leaf command.
    """
    mode = os.lstat(path).st_mode
    return stat.S_ISREG(mode) and bool(mode & stat.S_IXUSR)

# -----------------------------------------------------------------------------
# READING
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[str]:
    """
    List entry names sorted by name.

    Raises:
        OSError: Propagated unchanged (permission denied, I/O error).
    """
    return sorted(os.listdir(path))


def read_text(path: str) -> str:
    """Read a whole text file, tolerating undecodable bytes."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def iter_lines(path: str) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators."""
    with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        for line in f:
            yield line.rstrip("\r\n")
