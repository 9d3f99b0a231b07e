"""Decide whether styled output should carry escape sequences.

Styling is active when standard output is an interactive terminal and
the TERM_COLOR environment flag is not falsy. An explicit force value
overrides both.

A module-level default policy backs :func:`is_enabled` and
:func:`force`. It is process-wide state: tests that touch it must reset
it (``default_policy().reset()``) or use their own StylePolicy.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import TextIO

from gory.config import ENV_VAR, env_flag

logger = logging.getLogger(__name__)


def tty_attached(stream: TextIO | None = None) -> bool:
    """True if the stream (default: sys.stdout) is an interactive terminal.

    Streams without isatty(), and closed streams, are not terminals.
    """
    if stream is None:
        stream = sys.stdout
    if stream is None or not hasattr(stream, "isatty"):
        return False
    try:
        return bool(stream.isatty())
    except (ValueError, OSError):
        return False


class StylePolicy:
    """Resolves whether styling is currently enabled.

    The tty/environment result is computed once, on first use, and
    cached. The force value is read on every call.
    """

    def __init__(
        self,
        env_var: str = ENV_VAR,
        probe: Callable[[], bool] = tty_attached,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.env_var = env_var
        self._probe = probe
        self._environ = environ
        self._lock = threading.Lock()
        self._force: bool | None = None
        self._detected: bool | None = None

    def detect(self) -> bool:
        """The cached tty/environment result, ignoring any force value."""
        with self._lock:
            if self._detected is None:
                environ = os.environ if self._environ is None else self._environ
                tty = self._probe()
                flag = env_flag(self.env_var, True, environ)
                self._detected = tty and flag
                logger.debug(
                    "color detection: tty=%s %s=%s -> %s",
                    tty, self.env_var, flag, self._detected,
                )
            return self._detected

    @property
    def forced(self) -> bool | None:
        """Current force value (None when detection applies)."""
        with self._lock:
            return self._force

    def is_enabled(self) -> bool:
        forced = self.forced
        if forced is not None:
            return forced
        return self.detect()

    def set_force(self, value: bool | None) -> None:
        """Force styling on (True) or off (False), or restore detection (None)."""
        if value is not None:
            value = bool(value)
        with self._lock:
            self._force = value

    @contextmanager
    def forcing(self, value: bool | None) -> Iterator[StylePolicy]:
        """Apply a force value for the duration of a with block."""
        with self._lock:
            previous = self._force
        self.set_force(value)
        try:
            yield self
        finally:
            self.set_force(previous)

    def reset(self) -> None:
        """Clear the force value and the cached detection result."""
        with self._lock:
            self._force = None
            self._detected = None

    def __repr__(self) -> str:
        return f"StylePolicy(env_var={self.env_var!r}, forced={self.forced!r})"


_default_policy = StylePolicy()


def default_policy() -> StylePolicy:
    """The process-wide policy used when none is passed explicitly."""
    return _default_policy


def is_enabled() -> bool:
    """Whether the default policy currently enables styling."""
    return _default_policy.is_enabled()


def force(value: bool | None) -> None:
    """Set or clear the default policy's force value."""
    _default_policy.set_force(value)
