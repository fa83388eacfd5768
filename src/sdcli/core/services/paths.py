from __future__ import annotations

"""
Script Root Resolution.

Computes the ordered list of directories scanned for commands. This is a
pure sequence computation: missing directories are dropped later, at
traversal time.
"""

import logging
import os
from typing import Hashable, Iterable, List, TypeVar

from sdcli.domain.config import Settings
from sdcli.domain.constants import CWD_SCRIPTS_DIR, HOME_SCRIPTS_DIR

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_root_paths(home: str, cwd: str, sd_path: str = "") -> List[str]:
    """
    Build the de-duplicated root list: home, working directory, then SD_PATH.

    Args:
        home: User home directory.
        cwd: Current working directory, also the anchor of relative entries.
        sd_path: Path-list string (os.pathsep separated).

    Returns:
        List[str]: Normalized absolute paths, first occurrence kept.
    """
    home_root = os.path.join(home, HOME_SCRIPTS_DIR)
    cwd_root = os.path.join(cwd, CWD_SCRIPTS_DIR)
    extra = split_path_list(sd_path)

    logger.debug(f"Home scripts dir: {home_root}")
    logger.debug(f"Working dir scripts dir: {cwd_root}")
    logger.debug(f"SD_PATH is set to: {sd_path!r}, parsed as: {extra}")

    candidates = [home_root, cwd_root] + extra
    return deduplicate(os.path.normpath(os.path.join(cwd, p)) for p in candidates)


def roots_from_settings(settings: Settings) -> List[str]:
    """Resolve the roots for an already loaded Settings snapshot."""
    return resolve_root_paths(settings.home, settings.cwd, settings.sd_path)


def split_path_list(value: str) -> List[str]:
    """Split a path-list string, dropping empty entries."""
    if not value:
        return []
    return [p for p in value.split(os.pathsep) if p]


def deduplicate(items: Iterable[T]) -> List[T]:
    """
    Drop repeated elements, keeping the first occurrence and relative order.

    Args:
        items: Any iterable of hashable elements.

    Returns:
        List[T]: Surviving elements in input order.
    """
    seen = set()
    out: List[T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        out.append(item)
    return out
