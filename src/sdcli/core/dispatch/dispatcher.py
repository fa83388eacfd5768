from __future__ import annotations

"""
Command Dispatcher.

Decides what happens to an invoked command node: show its usage, open the
script in an editor, or replace the current process with the script.
Process creation goes through a ProcessRunner so the exec primitive can be
swapped for spawn-and-wait where exec semantics are unavailable, or for a
recorder in tests.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Mapping, Optional, Sequence

from sdcli.core.dispatch.environment import Environment, OsEnvironment, synthesize_environment
from sdcli.domain.command_models import CommandNode
from sdcli.domain.config import RuntimeFlags
from sdcli.domain.constants import (
    ENV_EDITOR,
    ENV_VISUAL,
    FALLBACK_EDITOR,
    SHELL_NAME,
    SHELL_PATH,
)
from sdcli.domain.errors import DispatchError
from sdcli.infra.logging import flush_logging

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PROCESS CAPABILITY
# -----------------------------------------------------------------------------

class ProcessRunner(ABC):
    """
    Abstract capability that starts a program in place of, or on behalf of,
    the current process.
    """

    @abstractmethod
    def execute(self, path: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        """
        Run a program.

        Args:
            path: Executable to run.
            argv: Full argument vector, program name first.
            env: Complete environment of the new program.

        Returns:
            int: Exit status to report, when the call returns at all.

        Raises:
            DispatchError: If the program cannot be started.
        """
        raise NotImplementedError


class ExecRunner(ProcessRunner):
    """Replace the current process image. Never returns on success."""

    def execute(self, path: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        flush_logging()
        try:
            os.execve(path, list(argv), dict(env))
        except OSError as e:
            raise DispatchError(f"cannot execute {path}: {e}") from e
        return 0  # pragma: no cover


class SpawnRunner(ProcessRunner):
    """
    Run the program as a child and wait for it.

    Used where exec does not replace the process. The parent survives and
    reports the child's exit status as its own.
    """

    def execute(self, path: str, argv: Sequence[str], env: Mapping[str, str]) -> int:
        flush_logging()
        try:
            proc = subprocess.Popen(list(argv), executable=path, env=dict(env))
        except OSError as e:
            raise DispatchError(f"cannot execute {path}: {e}") from e

        try:
            return proc.wait()
        except KeyboardInterrupt:
            # The child received the same interrupt; let it finish.
            proc.wait()
            return 130


def default_runner() -> ProcessRunner:
    return SpawnRunner() if os.name == "nt" else ExecRunner()

# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

class Action(Enum):
    SHOW_USAGE = "show-usage"
    EDIT = "edit"
    EXECUTE = "execute"


class Dispatcher:
    """
    Turn an invoked node into help output, an editor session or a new process.

    Args:
        environment: Source of VISUAL/EDITOR and of the inherited environment.
        runner: Process capability.
    """

    def __init__(
            self,
            environment: Optional[Environment] = None,
            runner: Optional[ProcessRunner] = None,
    ):
        self.environment = environment or OsEnvironment()
        self.runner = runner or default_runner()

    def decide(self, node: CommandNode, flags: RuntimeFlags) -> Action:
        """Select the action for a node without performing it."""
        if not node.is_leaf or not node.source:
            return Action.SHOW_USAGE
        if flags.edit:
            return Action.EDIT
        return Action.EXECUTE

    def dispatch(
            self,
            node: CommandNode,
            args: Sequence[str],
            flags: RuntimeFlags,
            show_usage: Callable[[], None],
    ) -> int:
        """
        Perform the action selected for a node.

        Args:
            node: Invoked command.
            args: Positional arguments already validated.
            flags: Runtime flags of the invocation.
            show_usage: Renders the node's help.

        Returns:
            int: Exit status. Execute/edit only return under SpawnRunner.

        Raises:
            DispatchError: If the process cannot be replaced or spawned.
        """
        action = self.decide(node, flags)
        logger.debug(f"Dispatching {node.name!r}: {action.value}")

        if action is Action.SHOW_USAGE:
            show_usage()
            return 0

        if action is Action.EDIT:
            cmdline = self.edit_command_line(node.source)
            logger.debug(f"Running {cmdline}")
            return self.runner.execute(SHELL_PATH, cmdline, self.environment.snapshot())

        argv = [node.source] + list(args)
        logger.debug(f"Exec: {node.source} with args: {list(args)}")
        env = synthesize_environment(self.environment.snapshot(), flags)
        return self.runner.execute(node.source, argv, env)

    def resolve_editor(self) -> str:
        """VISUAL, then EDITOR, then a shell-resolved vim."""
        editor = self.environment.get(ENV_VISUAL)
        if editor:
            return editor
        logger.debug("$VISUAL not set, trying $EDITOR...")
        editor = self.environment.get(ENV_EDITOR)
        if editor:
            return editor
        logger.debug("$EDITOR not set, trying $(which vim)...")
        return FALLBACK_EDITOR

    def edit_command_line(self, source: str) -> List[str]:
        return [SHELL_NAME, "-c", f"{self.resolve_editor()} {source}"]
