from __future__ import annotations

"""
Usage Line Grammar and Argument-Cardinality Compiler.

Parses the tail of a '# usage: <name> [<token> ...]' annotation and compiles
it into an ArgumentValidator. Bare tokens are required, bracketed tokens are
optional and a trailing '...' allows unbounded repetition.
"""

from dataclasses import dataclass
from typing import List, Tuple

from sdcli.domain.command_models import ArgumentValidator
from sdcli.domain.constants import OPTIONAL_CLOSE, OPTIONAL_OPEN, UNBOUNDED_MARKER

# -----------------------------------------------------------------------------
# MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class UsageLine:
    """
    Tokenized usage annotation.

    Attributes:
        name: Displayed command name (token 0).
        tokens: Argument tokens, markers included, in source order.
        required: Number of bare tokens.
        optional: Number of bracketed tokens.
        unbounded: True if the last token is the '...' marker.
    """
    name: str
    tokens: Tuple[str, ...]
    required: int
    optional: int
    unbounded: bool

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_usage(text: str) -> UsageLine:
    """
    Split a usage tail on single spaces and classify its tokens.

    A '...' token only counts as the unbounded marker in last position;
    anywhere else it is ignored.

    Args:
        text: Annotation tail, e.g. 'deploy env [tag] ...'.

    Returns:
        UsageLine: Classified tokens.

    Raises:
        ValueError: If the text holds no token at all.
    """
    parts = [p for p in text.split(" ") if p]
    if not parts:
        raise ValueError("usage line without command name")

    name, tokens = parts[0], parts[1:]
    required = 0
    optional = 0
    for token in tokens:
        if token == UNBOUNDED_MARKER:
            continue
        if _is_optional(token):
            optional += 1
        else:
            required += 1

    unbounded = bool(tokens) and tokens[-1] == UNBOUNDED_MARKER
    return UsageLine(
        name=name,
        tokens=tuple(tokens),
        required=required,
        optional=optional,
        unbounded=unbounded,
    )


def compile_validator(usage: UsageLine) -> ArgumentValidator:
    """
    Derive the argument-count policy of a parsed usage line.

    - no argument token: no arguments accepted
    - trailing '...': at least `required`
    - otherwise: between `required` and `required + optional`
    """
    if usage.required + usage.optional == 0:
        return ArgumentValidator.no_args()
    if usage.unbounded:
        return ArgumentValidator.at_least(usage.required)
    return ArgumentValidator.between(usage.required, usage.required + usage.optional)


def argument_tokens(usage: UsageLine) -> List[str]:
    """Tokens to render in help output, dangling markers dropped."""
    tokens = list(usage.tokens)
    return [
        t for i, t in enumerate(tokens)
        if t != UNBOUNDED_MARKER or i == len(tokens) - 1
    ]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_optional(token: str) -> bool:
    return (
        len(token) >= 2
        and token.startswith(OPTIONAL_OPEN)
        and token.endswith(OPTIONAL_CLOSE)
    )
