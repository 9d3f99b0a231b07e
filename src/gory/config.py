"""Load color configuration from the environment and TOML files."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from gory.errors import ConfigError

if TYPE_CHECKING:
    from gory.policy import StylePolicy

ENV_VAR = "TERM_COLOR"

# Values of a flag variable that count as false (compared lowercased).
FALSY_VALUES = ("0", "false")

MODES = ("auto", "always", "never")


def env_flag(
    name: str,
    default: bool,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Read a boolean flag from the environment.

    An unset variable gives ``default``. A set variable is false only
    when it equals '0' or 'false' (case-insensitive); any other value,
    including the empty string, is true.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(name)
    if value is None:
        return default
    return value.lower() not in FALSY_VALUES


def parse_mode(value: str) -> str:
    """Normalise a color mode name, raising ConfigError if unknown."""
    mode = value.strip().lower()
    if mode not in MODES:
        raise ConfigError(
            f"invalid color mode {value!r} (expected one of: {', '.join(MODES)})"
        )
    return mode


@dataclass(frozen=True)
class StyleConfig:
    """Color settings.

    Attributes:
        mode: 'auto' detects a terminal and honours the environment flag,
            'always' and 'never' force styling on or off.
        env_var: Environment variable consulted in 'auto' mode.
    """

    mode: str = "auto"
    env_var: str = ENV_VAR

    @property
    def force_value(self) -> bool | None:
        """The policy force value this mode corresponds to."""
        return {"auto": None, "always": True, "never": False}[self.mode]

    def build_policy(self) -> StylePolicy:
        """Create a StylePolicy configured from these settings."""
        from gory.policy import StylePolicy

        policy = StylePolicy(env_var=self.env_var)
        policy.set_force(self.force_value)
        return policy


def _build_config(data: dict) -> StyleConfig:
    """Build a StyleConfig from parsed TOML data."""
    section = data.get("color", {})
    if not isinstance(section, dict):
        raise ConfigError(f"color must be a table, got {section!r}")
    if not section:
        return StyleConfig()

    mode = section.get("mode", "auto")
    if not isinstance(mode, str):
        raise ConfigError(f"color.mode must be a string, got {mode!r}")

    env_var = section.get("env_var", ENV_VAR)
    if not isinstance(env_var, str) or not env_var:
        raise ConfigError(f"color.env_var must be a non-empty string, got {env_var!r}")

    return StyleConfig(mode=parse_mode(mode), env_var=env_var)


def load_config(config_path: Path | str) -> StyleConfig:
    """Load color settings from the [color] table of a TOML file.

    A file without a [color] table gives the defaults.
    """
    with open(Path(config_path), "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML in {config_path}: {e}") from e

    return _build_config(data)
