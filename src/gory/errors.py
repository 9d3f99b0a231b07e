"""Error types raised by gory."""

from __future__ import annotations


class StyleError(Exception):
    """Base class for gory errors."""


class RenderError(StyleError, OSError):
    """The output sink failed while a styled string was being written.

    The reset sequence has already been attempted by the time this is
    raised. The sink's own exception is chained as ``__cause__``.

    Attributes:
        stage: Render step that failed to complete, 'escape' when the
            opening sequence could not be written or 'payload' when the
            text itself could not be written.
    """

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


class ConfigError(StyleError, ValueError):
    """A configuration value is not recognised."""
