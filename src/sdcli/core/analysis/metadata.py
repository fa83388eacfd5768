from __future__ import annotations

"""
Script Metadata Extractor.

Scans a script for its annotation comments and derives the help text,
invocation syntax and example of the command it becomes. Annotations may
appear anywhere in the file; for each kind the first matching line wins.

    # deploy: Ship the current branch
    # usage: deploy env [tag] ...
    # example: deploy staging v1.2
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from sdcli.core.analysis.usage import UsageLine, argument_tokens, compile_validator, parse_usage
from sdcli.domain.command_models import ArgumentValidator
from sdcli.infra.fs import iter_lines

logger = logging.getLogger(__name__)

_USAGE_RX = re.compile(r"^# usage: (.*)$")
_EXAMPLE_RX = re.compile(r"^# example: (.*)$")

# -----------------------------------------------------------------------------
# MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Annotations:
    """
    Raw annotation values, None when absent.

    Attributes:
        description: Text after '# <basename>: '.
        usage: Text after '# usage: '.
        example: Text after '# example: '.
    """
    description: Optional[str] = None
    usage: Optional[str] = None
    example: Optional[str] = None


@dataclass(frozen=True)
class ScriptMetadata:
    """
    Everything the tree builder needs to turn a script into a leaf.

    Attributes:
        name: Displayed command name.
        short_help: Short description, possibly empty.
        example: Rendered example, possibly empty.
        validator: Positional-argument policy.
        usage_tokens: Argument tokens of the usage line, None without annotation.
    """
    name: str
    short_help: str
    example: str
    validator: ArgumentValidator
    usage_tokens: Optional[Sequence[str]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_annotations(path: str) -> Annotations:
    """
    Read a script once and collect the first match of each annotation.

    Args:
        path: Script to scan.

    Returns:
        Annotations: Raw values found.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    patterns = (
        ("description", re.compile(rf"^# {re.escape(os.path.basename(path))}: (.*)$")),
        ("usage", _USAGE_RX),
        ("example", _EXAMPLE_RX),
    )
    found: Dict[str, str] = {}

    for line in iter_lines(path):
        if not line.startswith("#"):
            continue
        for key, rx in patterns:
            if key in found:
                continue
            match = rx.match(line)
            if match:
                logger.debug(f"Found {key} line in {path}: {match.group(1)!r}")
                found[key] = match.group(1)
        if len(found) == len(patterns):
            break

    return Annotations(**found)


def render_example(tail: Optional[str], command_path: str) -> str:
    """
    Render an example tail as '  <command path> <tail>'.

    Args:
        tail: Text after '# example: ', None when absent.
        command_path: Full invocation path, alias included (e.g. 'sd db dump').

    Returns:
        str: Rendered example, empty when absent.
    """
    if tail is None:
        return ""
    return f"  {command_path} {tail}"


def extract_metadata(path: str, parent_path: Sequence[str]) -> ScriptMetadata:
    """
    Derive the leaf metadata of a script.

    Without a usage annotation the command is named after the file and
    accepts any number of arguments.

    Args:
        path: Script to scan.
        parent_path: Invocation path of the enclosing group, alias first.

    Returns:
        ScriptMetadata: Compiled metadata.
    """
    annotations = scan_annotations(path)
    usage = _parse_usage_or_none(annotations.usage)

    if usage is None:
        name = os.path.basename(path)
        validator = ArgumentValidator.unbounded()
        tokens = None
    else:
        name = usage.name
        validator = compile_validator(usage)
        tokens = argument_tokens(usage)

    command_path = " ".join(list(parent_path) + [name])
    return ScriptMetadata(
        name=name,
        short_help=annotations.description or "",
        example=render_example(annotations.example, command_path),
        validator=validator,
        usage_tokens=tokens,
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_usage_or_none(text: Optional[str]) -> Optional[UsageLine]:
    """A blank usage tail degrades to 'no annotation'."""
    if text is None:
        return None
    try:
        return parse_usage(text)
    except ValueError:
        logger.debug(f"Ignoring blank usage line: {text!r}")
        return None
