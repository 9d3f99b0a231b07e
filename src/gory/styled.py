"""Strings that carry a foreground color.

A StyledString is a ``str`` whose value is its plain text, so length,
slicing, comparison with plain text and concatenation all see only the
text. Converting it with ``str()``, ``format()`` or ``print()`` renders
it, wrapping the text in SGR escape sequences when the style policy is
enabled:

    >>> from gory import force, red
    >>> force(True)
    >>> str(red("hello"))
    '\\x1b[31mhello\\x1b[0m'
    >>> len(red("hello"))
    5

Color functions never enable bold. The ``bold_*`` functions do, on the
standard color. Re-styling replaces both color and bold.
"""

from __future__ import annotations

import io
import logging
from typing import Any, TextIO

from gory.color import Color
from gory.errors import RenderError
from gory.policy import StylePolicy, default_policy

logger = logging.getLogger(__name__)

ESC = "\x1b"
CSI = ESC + "["
BOLD = "1;"
RESET = CSI + "0m"


def _write_reset(sink: TextIO) -> None:
    try:
        sink.write(RESET)
    except Exception as e:
        logger.debug("could not write color reset sequence: %s", e)


class StyledString(str):
    """Immutable text plus an optional foreground color and bold flag.

    Attributes:
        color: Foreground color, or None to render as plain text.
        bold: Whether to add the bold parameter. Always False when
            color is None.
    """

    def __new__(
        cls,
        text: Any = "",
        color: Color | None = None,
        bold: bool = False,
    ) -> StyledString:
        if isinstance(text, StyledString):
            text = text.text
        self = super().__new__(cls, text)
        object.__setattr__(self, "_color", color)
        object.__setattr__(self, "_bold", bool(bold) and color is not None)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getnewargs__(self) -> tuple[str, Color | None, bool]:
        return (self.text, self._color, self._bold)

    @property
    def text(self) -> str:
        """The payload as a plain str."""
        return str.__str__(self)

    @property
    def color(self) -> Color | None:
        return self._color

    @property
    def bold(self) -> bool:
        return self._bold

    # -- comparison --------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StyledString):
            return (
                self.text == other.text
                and self._color is other._color
                and self._bold == other._bold
            )
        return str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = str.__hash__

    # -- rendering ---------------------------------------------------------

    def render(
        self,
        sink: TextIO | None = None,
        policy: StylePolicy | None = None,
    ) -> str | None:
        """Write the text to sink, styled if the policy allows it.

        With no sink, renders into a buffer and returns the result.
        Once the opening escape sequence has been started, the reset
        sequence is written on every exit path. A sink write failure is
        raised as RenderError after the reset has been attempted.
        """
        if sink is None:
            buf = io.StringIO()
            self.render(buf, policy)
            return buf.getvalue()

        if policy is None:
            policy = default_policy()

        text = self.text
        if self._color is None or not policy.is_enabled():
            try:
                sink.write(text)
            except (OSError, ValueError) as e:
                raise RenderError(f"failed to write text: {e}", "payload") from e
            return None

        stage = "escape"
        try:
            sink.write(CSI)
            if self._bold:
                sink.write(BOLD)
            sink.write(self._color.param)
            sink.write("m")
            stage = "payload"
            sink.write(text)
        except (OSError, ValueError) as e:
            raise RenderError(f"failed to write styled text ({stage}): {e}", stage) from e
        finally:
            _write_reset(sink)
        return None

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.render()
        return StyledString(
            format(self.text, format_spec), self._color, self._bold
        ).render()

    def __repr__(self) -> str:
        color = f"Color.{self._color.name}" if self._color is not None else "None"
        return f"StyledString({self.text!r}, color={color}, bold={self._bold})"

    # -- combinators -------------------------------------------------------

    def style(self, color: Color | None, bold: bool = False) -> StyledString:
        """Return a copy with the given color and bold flag."""
        return StyledString(self.text, color, bold)

    def clear(self) -> StyledString:
        """Return a copy with no color and no bold."""
        return StyledString(self.text)

    def black(self) -> StyledString:
        return self.style(Color.BLACK)

    def bright_black(self) -> StyledString:
        return self.style(Color.BRIGHT_BLACK)

    def bold_black(self) -> StyledString:
        return self.style(Color.BLACK, bold=True)

    def red(self) -> StyledString:
        return self.style(Color.RED)

    def bright_red(self) -> StyledString:
        return self.style(Color.BRIGHT_RED)

    def bold_red(self) -> StyledString:
        return self.style(Color.RED, bold=True)

    def green(self) -> StyledString:
        return self.style(Color.GREEN)

    def bright_green(self) -> StyledString:
        return self.style(Color.BRIGHT_GREEN)

    def bold_green(self) -> StyledString:
        return self.style(Color.GREEN, bold=True)

    def yellow(self) -> StyledString:
        return self.style(Color.YELLOW)

    def bright_yellow(self) -> StyledString:
        return self.style(Color.BRIGHT_YELLOW)

    def bold_yellow(self) -> StyledString:
        return self.style(Color.YELLOW, bold=True)

    def blue(self) -> StyledString:
        return self.style(Color.BLUE)

    def bright_blue(self) -> StyledString:
        return self.style(Color.BRIGHT_BLUE)

    def bold_blue(self) -> StyledString:
        return self.style(Color.BLUE, bold=True)

    def magenta(self) -> StyledString:
        return self.style(Color.MAGENTA)

    def bright_magenta(self) -> StyledString:
        return self.style(Color.BRIGHT_MAGENTA)

    def bold_magenta(self) -> StyledString:
        return self.style(Color.MAGENTA, bold=True)

    def cyan(self) -> StyledString:
        return self.style(Color.CYAN)

    def bright_cyan(self) -> StyledString:
        return self.style(Color.BRIGHT_CYAN)

    def bold_cyan(self) -> StyledString:
        return self.style(Color.CYAN, bold=True)

    def white(self) -> StyledString:
        return self.style(Color.WHITE)

    def bright_white(self) -> StyledString:
        return self.style(Color.BRIGHT_WHITE)

    def bold_white(self) -> StyledString:
        return self.style(Color.WHITE, bold=True)


def style(text: Any, color: Color | None, bold: bool = False) -> StyledString:
    """Wrap text with a color and bold flag."""
    return StyledString(text, color, bold)


def clear(text: Any) -> StyledString:
    """Wrap text with no styling, dropping any existing style."""
    return StyledString(text)


def black(text: Any) -> StyledString:
    return style(text, Color.BLACK)


def bright_black(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_BLACK)


def bold_black(text: Any) -> StyledString:
    return style(text, Color.BLACK, bold=True)


def red(text: Any) -> StyledString:
    return style(text, Color.RED)


def bright_red(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_RED)


def bold_red(text: Any) -> StyledString:
    return style(text, Color.RED, bold=True)


def green(text: Any) -> StyledString:
    return style(text, Color.GREEN)


def bright_green(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_GREEN)


def bold_green(text: Any) -> StyledString:
    return style(text, Color.GREEN, bold=True)


def yellow(text: Any) -> StyledString:
    return style(text, Color.YELLOW)


def bright_yellow(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_YELLOW)


def bold_yellow(text: Any) -> StyledString:
    return style(text, Color.YELLOW, bold=True)


def blue(text: Any) -> StyledString:
    return style(text, Color.BLUE)


def bright_blue(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_BLUE)


def bold_blue(text: Any) -> StyledString:
    return style(text, Color.BLUE, bold=True)


def magenta(text: Any) -> StyledString:
    return style(text, Color.MAGENTA)


def bright_magenta(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_MAGENTA)


def bold_magenta(text: Any) -> StyledString:
    return style(text, Color.MAGENTA, bold=True)


def cyan(text: Any) -> StyledString:
    return style(text, Color.CYAN)


def bright_cyan(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_CYAN)


def bold_cyan(text: Any) -> StyledString:
    return style(text, Color.CYAN, bold=True)


def white(text: Any) -> StyledString:
    return style(text, Color.WHITE)


def bright_white(text: Any) -> StyledString:
    return style(text, Color.BRIGHT_WHITE)


def bold_white(text: Any) -> StyledString:
    return style(text, Color.WHITE, bold=True)
