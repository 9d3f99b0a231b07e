"""gory: ANSI foreground colors for terminal output.

Styling is applied only when standard output is a terminal and the
TERM_COLOR environment variable is not '0' or 'false'. force() overrides
detection.

Quick start:
    from gory import bold_green, red

    print(red("error:"), "something failed")
    print(bold_green("done"))
"""

from gory.color import BRIGHT_COLORS, STANDARD_COLORS, Color
from gory.config import StyleConfig, env_flag, load_config
from gory.errors import ConfigError, RenderError, StyleError
from gory.policy import (
    StylePolicy,
    default_policy,
    force,
    is_enabled,
    tty_attached,
)
from gory.styled import (
    RESET,
    StyledString,
    black,
    blue,
    bold_black,
    bold_blue,
    bold_cyan,
    bold_green,
    bold_magenta,
    bold_red,
    bold_white,
    bold_yellow,
    bright_black,
    bright_blue,
    bright_cyan,
    bright_green,
    bright_magenta,
    bright_red,
    bright_white,
    bright_yellow,
    clear,
    cyan,
    green,
    magenta,
    red,
    style,
    white,
    yellow,
)

__version__ = "0.1.0"

__all__ = [
    "BRIGHT_COLORS",
    "Color",
    "ConfigError",
    "RESET",
    "RenderError",
    "STANDARD_COLORS",
    "StyleConfig",
    "StyleError",
    "StylePolicy",
    "StyledString",
    "black",
    "blue",
    "bold_black",
    "bold_blue",
    "bold_cyan",
    "bold_green",
    "bold_magenta",
    "bold_red",
    "bold_white",
    "bold_yellow",
    "bright_black",
    "bright_blue",
    "bright_cyan",
    "bright_green",
    "bright_magenta",
    "bright_red",
    "bright_white",
    "bright_yellow",
    "clear",
    "cyan",
    "default_policy",
    "env_flag",
    "force",
    "green",
    "is_enabled",
    "load_config",
    "magenta",
    "red",
    "style",
    "tty_attached",
    "white",
    "yellow",
]
