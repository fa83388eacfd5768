from __future__ import annotations

"""
Command Tree Data Models.

Provides the structural node used to mirror a scripts directory as a
command hierarchy, and the immutable argument-count policy compiled from
a script's usage annotation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from sdcli.domain.errors import ArgumentCountError

# -----------------------------------------------------------------------------
# ARGUMENT VALIDATION
# -----------------------------------------------------------------------------

class Cardinality(Enum):
    """Shape of the positional-argument policy of a command."""
    NONE = "none"
    EXACT = "exact"
    RANGE = "range"
    MINIMUM = "minimum"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class ArgumentValidator:
    """
    Immutable policy describing how many positional arguments a command accepts.

    Attributes:
        kind: Policy shape.
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive), None when unbounded.
    """
    kind: Cardinality
    minimum: int = 0
    maximum: Optional[int] = None

    @classmethod
    def no_args(cls) -> ArgumentValidator:
        return cls(Cardinality.NONE, 0, 0)

    @classmethod
    def exact(cls, n: int) -> ArgumentValidator:
        return cls(Cardinality.EXACT, n, n)

    @classmethod
    def between(cls, minimum: int, maximum: int) -> ArgumentValidator:
        if minimum == maximum:
            return cls.exact(minimum)
        return cls(Cardinality.RANGE, minimum, maximum)

    @classmethod
    def at_least(cls, minimum: int) -> ArgumentValidator:
        return cls(Cardinality.MINIMUM, minimum, None)

    @classmethod
    def unbounded(cls) -> ArgumentValidator:
        return cls(Cardinality.UNBOUNDED, 0, None)

    @property
    def takes_args(self) -> bool:
        """True if the command accepts at least one positional argument."""
        return self.kind is not Cardinality.NONE

    def accepts(self, count: int) -> bool:
        """Check an argument count against the policy."""
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def validate(self, args: Sequence[str], command_path: str = "") -> None:
        """
        Enforce the policy on the actual positional arguments.

        Args:
            args: Positional arguments supplied by the user.
            command_path: Full invocation path, used in error messages.

        Raises:
            ArgumentCountError: If the count is not accepted.
        """
        count = len(args)
        if self.accepts(count):
            return

        if self.kind is Cardinality.NONE:
            raise ArgumentCountError(f'unknown command "{args[0]}" for "{command_path}"')
        if self.kind is Cardinality.EXACT:
            raise ArgumentCountError(f"accepts {self.minimum} arg(s), received {count}")
        if self.kind is Cardinality.RANGE:
            raise ArgumentCountError(
                f"accepts between {self.minimum} and {self.maximum} arg(s), received {count}"
            )
        raise ArgumentCountError(
            f"requires at least {self.minimum} arg(s), only received {count}"
        )

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    GROUP = "group"
    LEAF = "leaf"


@dataclass(frozen=True)
class CommandNode:
    """
    Represents either a group (directory) or a leaf (executable script).

    Attributes:
        name: Displayed command name.
        kind: Group or leaf.
        short_help: One-line description.
        long_help: Full README contents, None when the group has no README.
        example: Rendered example text.
        validator: Positional-argument policy.
        usage: Argument tokens of the usage annotation, name excluded (leaves only).
        source: Absolute path of the script (leaves only).
        children: Ordered child nodes (groups only).
    """
    name: str
    kind: NodeKind
    short_help: str = ""
    long_help: Optional[str] = None
    example: str = ""
    validator: ArgumentValidator = field(default_factory=ArgumentValidator.unbounded)
    usage: Optional[Tuple[str, ...]] = None
    source: Optional[str] = None
    children: Tuple[CommandNode, ...] = ()

    @property
    def is_group(self) -> bool:
        return self.kind is NodeKind.GROUP

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    def shows_usage(self) -> bool:
        """Groups with children or a README answer invocation with their usage."""
        return self.is_group and (bool(self.children) or self.long_help is not None)

    @property
    def is_inert(self) -> bool:
        """A childless group without README has no action at all."""
        return self.is_group and not self.shows_usage

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
