from __future__ import annotations

"""
Command Tree Builder.

Mirrors script directories as a command hierarchy: every subdirectory
becomes a group, every executable regular file a leaf. Hidden entries are
skipped without recursion and a README inside a group becomes its help.
"""

import logging
import os
from typing import Iterable, List, Sequence

from sdcli.core.analysis.metadata import extract_metadata
from sdcli.domain.command_models import ArgumentValidator, CommandNode, NodeKind
from sdcli.domain.constants import DEFAULT_ALIAS, README_NAME
from sdcli.infra.fs import (
    is_executable_file,
    is_hidden,
    is_real_directory,
    list_directory,
    read_text,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_command_tree(roots: Iterable[str], alias: str = DEFAULT_ALIAS) -> CommandNode:
    """
    Build every root and compose the results under a synthetic top node.

    Args:
        roots: Ordered root directories (see core.services.paths).
        alias: Displayed program identity, name of the top node.

    Returns:
        CommandNode: Top-level group.

    Raises:
        OSError: On any listing or read failure; no partial tree is returned.
    """
    logger.debug("Loading commands started")
    children: List[CommandNode] = []
    for root in roots:
        children.extend(build(root, (alias,)))
    logger.debug(f"Loading commands done: {len(children)} top-level command(s)")

    return CommandNode(
        name=alias,
        kind=NodeKind.GROUP,
        validator=ArgumentValidator.no_args(),
        children=tuple(children),
    )


def build(directory: str, parent_path: Sequence[str] = (DEFAULT_ALIAS,)) -> List[CommandNode]:
    """
    Turn the entries of a directory into command nodes, recursively.

    Args:
        directory: Directory to visit.
        parent_path: Invocation path of the enclosing command, alias first.

    Returns:
        List[CommandNode]: Nodes in name order; empty if the directory is missing.

    Raises:
        OSError: If listing the directory or reading a script fails.
    """
    logger.debug(f"Visiting path: {directory}")
    if not os.path.exists(directory):
        logger.debug(f"Path does not exist: {directory}")
        return []

    nodes: List[CommandNode] = []
    for name in list_directory(directory):
        path = os.path.join(directory, name)

        if is_hidden(name):
            logger.debug(f"Ignoring hidden path: {path}")
            continue

        if is_real_directory(path):
            logger.debug(f"Found directory: {path}")
            nodes.append(_build_group(path, name, parent_path))

        elif is_executable_file(path):
            logger.debug(f"Script found: {path}")
            nodes.append(_build_leaf(path, parent_path))

    return nodes

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_group(path: str, name: str, parent_path: Sequence[str]) -> CommandNode:
    short_help = ""
    long_help = None

    readme_path = os.path.join(path, README_NAME)
    if os.path.isfile(readme_path):
        logger.debug(f"Found README at: {readme_path}")
        long_help = read_text(readme_path)
        short_help = long_help.split("\n")[0]

    children = build(path, tuple(parent_path) + (name,))
    if children:
        logger.debug(f"Directory has scripts (subcommands) inside it: {path}")

    return CommandNode(
        name=name,
        kind=NodeKind.GROUP,
        short_help=short_help,
        long_help=long_help,
        validator=ArgumentValidator.no_args(),
        children=tuple(children),
    )


def _build_leaf(path: str, parent_path: Sequence[str]) -> CommandNode:
    meta = extract_metadata(path, parent_path)
    logger.debug(f"Created command: {meta.name}")

    return CommandNode(
        name=meta.name,
        kind=NodeKind.LEAF,
        short_help=meta.short_help,
        example=meta.example,
        validator=meta.validator,
        usage=tuple(meta.usage_tokens) if meta.usage_tokens is not None else None,
        source=os.path.abspath(path),
    )
