from __future__ import annotations

"""
Unit tests for CLI Argument Definition.

Verifies the translation of a command tree into argparse sub-parsers:
help texts, usage strings, persistent flags and node selection.
"""

import pytest

from sdcli.domain.command_models import ArgumentValidator, CommandNode, NodeKind
from sdcli.interface.cli.args import build_parser, script_args, selected_node, selected_parser

DUMP = CommandNode(
    name="dump",
    kind=NodeKind.LEAF,
    short_help="Dump a table (100% safe)",
    example="  quack db dump users",
    validator=ArgumentValidator.between(1, 2),
    usage=("table", "[file]"),
    source="/scripts/db/dump",
)
PING = CommandNode(
    name="ping",
    kind=NodeKind.LEAF,
    validator=ArgumentValidator.no_args(),
    usage=(),
    source="/scripts/ping",
)
DB = CommandNode(
    name="db",
    kind=NodeKind.GROUP,
    short_help="Database helpers",
    long_help="Database helpers\n\nMore words.\n",
    validator=ArgumentValidator.no_args(),
    children=(DUMP,),
)
EMPTY = CommandNode(name="empty", kind=NodeKind.GROUP, validator=ArgumentValidator.no_args())
TREE = CommandNode(
    name="quack",
    kind=NodeKind.GROUP,
    validator=ArgumentValidator.no_args(),
    children=(DB, PING, EMPTY),
)


def parse(argv):
    parser = build_parser(TREE)
    return parser.parse_args(argv)


def test_root_selected_without_subcommand():
    ns = parse([])
    assert selected_node(ns) is TREE
    assert script_args(ns) == []
    assert ns.edit is False
    assert ns.debug is False


def test_leaf_selection_and_arguments():
    ns = parse(["db", "dump", "users", "out.sql"])

    assert selected_node(ns) is DUMP
    assert selected_parser(ns).prog == "quack db dump"
    assert script_args(ns) == ["users", "out.sql"]


def test_persistent_flags_before_and_after_subcommand():
    assert parse(["-e", "db", "dump", "t"]).edit is True
    assert parse(["db", "dump", "t", "--edit"]).edit is True
    assert parse(["-d", "ping"]).debug is True


def test_dash_arguments_after_separator():
    ns = parse(["db", "dump", "--", "-x"])
    assert script_args(ns) == ["-x"]


def test_no_arg_leaf_rejects_positionals():
    with pytest.raises(SystemExit) as exc:
        parse(["ping", "extra"])
    assert exc.value.code == 2


def test_inert_group_is_not_registered():
    with pytest.raises(SystemExit):
        parse(["empty"])


def test_help_texts():
    parser = build_parser(TREE)
    root_help = parser.format_help()

    assert root_help.startswith("usage: quack")
    assert "Database helpers" in root_help
    assert "--alias" not in root_help

    dump_parser = selected_parser(parser.parse_args(["db", "dump", "t"]))
    dump_help = dump_parser.format_help()
    assert dump_help.startswith("usage: quack db dump table [file]")
    assert "Dump a table (100% safe)" in dump_help
    assert "Examples:\n  quack db dump users" in dump_help

    db_help = selected_parser(parser.parse_args(["db"])).format_help()
    assert "More words." in db_help


def test_duplicate_names_first_wins():
    other = CommandNode(name="ping", kind=NodeKind.LEAF, source="/other/ping")
    tree = CommandNode(name="sd", kind=NodeKind.GROUP, children=(PING, other))

    ns = build_parser(tree).parse_args(["ping"])
    assert selected_node(ns).source == "/scripts/ping"
