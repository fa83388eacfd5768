from __future__ import annotations

"""
Domain Exceptions.

Filesystem failures are not wrapped: they surface as the original OSError.
"""


class SdError(Exception):
    """Base class for errors raised by sd itself."""


class ArgumentCountError(SdError):
    """The number of positional arguments does not satisfy a command's validator."""


class DispatchError(SdError):
    """The process image could not be replaced (or the child could not be spawned)."""
