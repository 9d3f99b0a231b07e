"""ANSI foreground colors.

The eight standard colors map to SGR parameters 30-37 and their bright
variants to 90-97. Background colors and extended palettes are not
supported.
"""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """A foreground color, valued by its SGR parameter."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def param(self) -> str:
        """Two-digit SGR parameter, e.g. '31' for red."""
        return str(self.value)

    @property
    def is_bright(self) -> bool:
        return self.value >= 90

    @property
    def bright(self) -> Color:
        """The bright variant of this color (bright colors map to themselves)."""
        if self.is_bright:
            return self
        return Color(self.value + 60)

    def __str__(self) -> str:
        return self.param


STANDARD_COLORS: tuple[Color, ...] = tuple(c for c in Color if not c.is_bright)
BRIGHT_COLORS: tuple[Color, ...] = tuple(c for c in Color if c.is_bright)
