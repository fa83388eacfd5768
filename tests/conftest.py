from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A factory writing scripts into temporary directories.
3. Recording doubles for the environment and process capabilities.
"""

import os
import stat
import sys
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from sdcli.core.dispatch.dispatcher import ProcessRunner  # noqa: E402
from sdcli.core.dispatch.environment import Environment  # noqa: E402


# -----------------------------------------------------------------------------
# Filesystem Fixtures
# -----------------------------------------------------------------------------
ScriptFactory = Callable[..., Path]


@pytest.fixture
def make_script() -> ScriptFactory:
    """
    Return a factory that writes a script file.

    The factory signature is (path, body="", executable=True) and parent
    directories are created on demand.
    """
    def _make(path: Path, body: str = "", executable: bool = True) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        mode = path.stat().st_mode
        if executable:
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        else:
            path.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
        return path

    return _make


# -----------------------------------------------------------------------------
# Capability Doubles
# -----------------------------------------------------------------------------
class RecordingRunner(ProcessRunner):
    """Process capability that records calls instead of replacing the process."""

    def __init__(self, status: int = 0):
        self.status = status
        self.calls: List[Tuple[str, List[str], Dict[str, str]]] = []

    def execute(self, path: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        self.calls.append((path, list(argv), dict(env)))
        return self.status


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def fake_env() -> Callable[[Optional[Dict[str, str]]], Environment]:
    """Build an Environment from a plain dictionary."""
    def _build(values: Optional[Dict[str, str]] = None) -> Environment:
        return Environment(values or {})
    return _build


# -----------------------------------------------------------------------------
# Logging Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logging():
    """Detach sd's handlers so each test configures logging from scratch."""
    import logging

    from sdcli.infra.logging import _CONFIGURED_FLAG_ATTR, _HANDLER_TAG_ATTR

    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
    root.setLevel(logging.WARNING)
