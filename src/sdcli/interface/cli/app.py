from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates one invocation: pre-scan of identity/debug flags, logging
bootstrap, root resolution, command tree build, argument parsing and
validation, then dispatch. A successful script execution never returns
here because the process image is replaced.
"""

import dataclasses
import logging
import sys
from typing import List, Optional

from sdcli.core.analysis.tree_builder import load_command_tree
from sdcli.core.dispatch.dispatcher import Dispatcher
from sdcli.core.services.paths import roots_from_settings
from sdcli.domain.config import Settings, load_settings
from sdcli.domain.errors import ArgumentCountError, DispatchError
from sdcli.infra.logging import LoggingConfig, configure_logging
from sdcli.interface.cli import args as cli_args
from sdcli.interface.cli.flags import scan_runtime_flags

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        settings: Optional[Settings] = None,
        dispatcher: Optional[Dispatcher] = None,
) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Command line arguments without program name. Defaults to sys.argv[1:].
        settings: Environment settings. Defaults to the current process.
        dispatcher: Dispatcher to use. Defaults to exec on the real environment.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    raw = sys.argv[1:] if argv is None else list(argv)

    # 1. Identity and verbosity must be known before any help text exists
    flags = scan_runtime_flags(raw)
    settings = settings or load_settings()

    configure_logging(LoggingConfig.for_invocation(flags.debug, settings.log_file))
    logger.debug(f"Runtime flags: alias={flags.alias!r} debug={flags.debug}")

    # 2. Command tree
    roots = roots_from_settings(settings)
    logger.debug(f"Script roots: {roots}")
    try:
        tree = load_command_tree(roots, alias=flags.alias)
    except OSError as e:
        logger.debug(f"Error loading commands: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 3. Argument parsing and validation
    parser = cli_args.build_parser(tree)
    ns = parser.parse_args(raw)

    node = cli_args.selected_node(ns)
    node_parser = cli_args.selected_parser(ns)
    positional = cli_args.script_args(ns)

    try:
        node.validator.validate(positional, node_parser.prog)
    except ArgumentCountError as e:
        node_parser.error(str(e))

    flags = dataclasses.replace(flags, edit=bool(ns.edit))

    # 4. Dispatch
    dispatcher = dispatcher or Dispatcher()
    try:
        return dispatcher.dispatch(node, positional, flags, show_usage=node_parser.print_help)
    except DispatchError as e:
        logger.debug(f"Error executing command: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
