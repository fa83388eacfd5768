from __future__ import annotations

"""
CLI Argument Definition.

Translates a command tree into an argparse parser: groups become nested
sub-parsers, leaves become sub-parsers that collect their positional
arguments. The parsed namespace carries the selected node and its parser
under the '_node' and '_parser' keys.
"""

import argparse
import logging
from typing import Any, List, Optional

from sdcli import __version__
from sdcli.domain.command_models import CommandNode
from sdcli.domain.constants import DEFAULT_ALIAS

logger = logging.getLogger(__name__)

NODE_KEY = "_node"
PARSER_KEY = "_parser"
ARGS_KEY = "script_args"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser(tree: CommandNode) -> argparse.ArgumentParser:
    """
    Construct the argument parser for a command tree.

    Args:
        tree: Synthetic top node; its name is the displayed program identity.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=tree.name or DEFAULT_ALIAS,
        allow_abbrev=False,
        description="Run the scripts of your script directories as commands.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_persistent_flags(p, top_level=True)
    p.set_defaults(**{NODE_KEY: tree, PARSER_KEY: p, ARGS_KEY: []})

    _add_children(p, tree)
    return p


def selected_node(ns: argparse.Namespace) -> CommandNode:
    return getattr(ns, NODE_KEY)


def selected_parser(ns: argparse.Namespace) -> argparse.ArgumentParser:
    return getattr(ns, PARSER_KEY)


def script_args(ns: argparse.Namespace) -> List[str]:
    return list(getattr(ns, ARGS_KEY))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _add_persistent_flags(p: argparse.ArgumentParser, top_level: bool) -> None:
    """
    Register the flags accepted at every level of the tree.

    Sub-parsers suppress their defaults so a flag given before the
    subcommand is not reset by the sub-parser.
    """
    def default(value: Any) -> Any:
        return value if top_level else argparse.SUPPRESS

    p.add_argument(
        "-a", "--alias",
        default=default(DEFAULT_ALIAS),
        help=argparse.SUPPRESS,
    )
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        default=default(False),
        help="Turn debugging on/off",
    )
    p.add_argument(
        "-e", "--edit",
        action="store_true",
        default=default(False),
        help="Edit command",
    )


def _add_children(p: argparse.ArgumentParser, node: CommandNode) -> None:
    children = [c for c in node.children if not c.is_inert]
    if not children:
        return

    subparsers = p.add_subparsers(title="Available Commands", metavar="COMMAND")
    registered = set()

    for child in children:
        if child.name in registered:
            logger.warning(f"Duplicate command {child.name!r} in {p.prog!r} skipped")
            continue
        registered.add(child.name)

        sub = subparsers.add_parser(
            child.name,
            help=_escape(child.short_help) or None,
            description=child.long_help if child.long_help is not None else (child.short_help or None),
            epilog=_epilog(child.example),
            usage=_usage(child),
            allow_abbrev=False,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _add_persistent_flags(sub, top_level=False)
        sub.set_defaults(**{NODE_KEY: child, PARSER_KEY: sub, ARGS_KEY: []})

        if child.is_leaf and child.validator.takes_args:
            sub.add_argument(ARGS_KEY, nargs="*", metavar="args", help=argparse.SUPPRESS)

        _add_children(sub, child)


def _usage(node: CommandNode) -> Optional[str]:
    """Reproduce the usage annotation; argparse generates the rest."""
    if node.usage is None:
        return None
    return " ".join(["%(prog)s"] + [_escape(t) for t in node.usage])


def _epilog(example: str) -> Optional[str]:
    if not example:
        return None
    return "Examples:\n" + example


def _escape(text: str) -> str:
    """argparse %-formats help and usage strings."""
    return text.replace("%", "%%")
