"""
siquant.core.precondition
=========================

Reporting of programmer errors (dimension mismatches, zero-scale units,
square roots of non-square units).

Every check goes through :func:`precondition`, which hands the failure
message to a process-wide, replaceable failure handler. The default handler
raises :class:`PreconditionError` and is meant to be left uncaught. Test
code can install a non-raising handler to observe failures instead:

>>> from siquant.core.precondition import failure_handler, precondition
>>> seen = []
>>> with failure_handler(seen.append):
...     precondition(False, "boom")
False
>>> seen
['boom']
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

FailureHandler = Callable[[str], None]


class PreconditionError(AssertionError):
    """A fatal precondition was violated. The message is part of the API."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def _raise_precondition_error(message: str) -> None:
    raise PreconditionError(message)


_DEFAULT_HANDLER: FailureHandler = _raise_precondition_error
_handler: FailureHandler = _DEFAULT_HANDLER


def precondition(condition: bool, message: str = "") -> bool:
    """
    Check ``condition`` and report ``message`` through the active handler
    when it does not hold.

    Returns ``True`` when the condition holds. Returns ``False`` only when a
    non-raising handler is installed and the condition failed, letting the
    caller decide how to carry on.
    """
    if condition:
        return True
    logger.debug("Precondition failed: %s", message or "<no message>")
    _handler(message)
    return False


def get_failure_handler() -> FailureHandler:
    return _handler


def set_failure_handler(handler: Optional[FailureHandler]) -> FailureHandler:
    """Install ``handler`` (``None`` restores the default) and return the previous one."""
    global _handler
    previous = _handler
    _handler = handler if handler is not None else _DEFAULT_HANDLER
    return previous


def reset_failure_handler() -> None:
    set_failure_handler(None)


@contextmanager
def failure_handler(handler: FailureHandler) -> Iterator[FailureHandler]:
    """Temporarily install ``handler``; the previous handler is restored on exit."""
    previous = set_failure_handler(handler)
    try:
        yield handler
    finally:
        set_failure_handler(previous)


__all__ = [
    "FailureHandler",
    "PreconditionError",
    "precondition",
    "get_failure_handler",
    "set_failure_handler",
    "reset_failure_handler",
    "failure_handler",
]
