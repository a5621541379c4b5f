"""
Diagnostic channel used while a processing pass runs.

Messages go through the standard `logging` module so the host (or the CLI)
decides where they end up. A single prefixed instance can be retained for
the duration of a pass and reached from helpers that are not handed one.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

DEFAULT_LOGGER_NAME = "genfiler"

_lock = threading.Lock()
_retained: Optional["Diagnostics"] = None


class Diagnostics:
    """
    Prefixed note/warning/error reporting on top of a stdlib logger.

    Args:
        prefix: Text placed on its own line before each message; omitted when empty.
        logger: Target logger. Defaults to the `genfiler` logger.
    """

    def __init__(self, prefix: Optional[str] = None, logger: Optional[logging.Logger] = None) -> None:
        self.prefix = prefix
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)

    def _render(self, message: str) -> str:
        if not self.prefix:
            return message
        return f"{self.prefix}:\n{message}"

    def note(self, message: str) -> None:
        self.logger.info(self._render(message))

    def warning(self, message: str) -> None:
        self.logger.warning(self._render(message))

    def error(self, message: str) -> None:
        self.logger.error(self._render(message))


def _retain(prefix: Optional[str], logger: Optional[logging.Logger]) -> Tuple[Diagnostics, bool]:
    """Return the held instance and whether this call created it."""
    global _retained
    with _lock:
        if _retained is None:
            _retained = Diagnostics(prefix, logger)
            return _retained, True
        return _retained, False


def retain_diagnostics(prefix: Optional[str] = None, logger: Optional[logging.Logger] = None) -> Diagnostics:
    """Retain a diagnostics instance unless one is already held; return the held one."""
    diagnostics, _ = _retain(prefix, logger)
    return diagnostics


def clear_diagnostics() -> None:
    global _retained
    with _lock:
        _retained = None


def current_diagnostics() -> Diagnostics:
    """Return the retained instance, or an unprefixed one on the default logger."""
    with _lock:
        retained = _retained
    return retained if retained is not None else Diagnostics()


@contextmanager
def diagnostics_session(prefix: Optional[str] = None, logger: Optional[logging.Logger] = None) -> Iterator[Diagnostics]:
    """
    Retain diagnostics for one processing pass.

    Only the session that created the retained instance clears it, so a nested
    or overlapping session leaves the outer pass's instance in place.
    """
    global _retained
    diagnostics, owned = _retain(prefix, logger)
    try:
        yield diagnostics
    finally:
        if owned:
            with _lock:
                if _retained is diagnostics:
                    _retained = None


def _require_retained() -> Diagnostics:
    with _lock:
        retained = _retained
    if retained is None:
        raise RuntimeError("No retained diagnostics instance")
    return retained


def compiler_note(message: str) -> None:
    _require_retained().note(message)


def compiler_warning(message: str) -> None:
    _require_retained().warning(message)


def compiler_error(message: str) -> None:
    _require_retained().error(message)
