from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Argument-count acceptance of every validator shape.
2. Cobra-style error messages on rejection.
3. Group/leaf classification of command nodes.
"""

import dataclasses

import pytest

from sdcli.domain.command_models import ArgumentValidator, Cardinality, CommandNode, NodeKind
from sdcli.domain.errors import ArgumentCountError


def test_no_args_validator_rejects_any_argument():
    v = ArgumentValidator.no_args()
    assert v.accepts(0)
    assert not v.accepts(1)
    assert not v.takes_args

    with pytest.raises(ArgumentCountError, match='unknown command "x" for "sd foo"'):
        v.validate(["x"], "sd foo")


def test_between_collapses_to_exact():
    v = ArgumentValidator.between(2, 2)
    assert v.kind is Cardinality.EXACT
    assert v.accepts(2)
    assert not v.accepts(1)
    assert not v.accepts(3)

    with pytest.raises(ArgumentCountError, match=r"accepts 2 arg\(s\), received 3"):
        v.validate(["a", "b", "c"])


def test_range_and_minimum_messages():
    with pytest.raises(ArgumentCountError, match=r"accepts between 1 and 2 arg\(s\), received 0"):
        ArgumentValidator.between(1, 2).validate([])

    with pytest.raises(ArgumentCountError, match=r"requires at least 2 arg\(s\), only received 1"):
        ArgumentValidator.at_least(2).validate(["a"])


def test_unbounded_accepts_everything():
    v = ArgumentValidator.unbounded()
    for n in (0, 1, 50):
        assert v.accepts(n)
    v.validate(["a"] * 10)


def test_validators_are_immutable():
    v = ArgumentValidator.exact(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.minimum = 3  # type: ignore[misc]


def test_group_node_classification():
    leaf = CommandNode(name="hello", kind=NodeKind.LEAF, source="/tmp/hello")
    empty = CommandNode(name="empty", kind=NodeKind.GROUP)
    readme_only = CommandNode(name="docs", kind=NodeKind.GROUP, long_help="")
    parent = CommandNode(name="tools", kind=NodeKind.GROUP, children=(leaf,))

    assert leaf.is_leaf and not leaf.is_inert
    assert empty.is_inert
    assert readme_only.shows_usage
    assert parent.shows_usage
    assert [n.name for n in parent.walk()] == ["tools", "hello"]
