"""CLI entry point for gory.

Subcommands:
    palette    Print every color, labelled with its escape sequence.
    status     Show whether styling is enabled and why.
"""

from __future__ import annotations

import argparse
import sys

from gory.color import STANDARD_COLORS
from gory.config import StyleConfig, load_config, parse_mode
from gory.errors import ConfigError
from gory.policy import StylePolicy
from gory.styled import StyledString


def _load_config(args: argparse.Namespace) -> StyleConfig:
    """Load config from --config (if given), applying --color on top."""
    config = StyleConfig()
    if args.config:
        config = load_config(args.config)
    if args.color:
        config = StyleConfig(mode=parse_mode(args.color), env_var=config.env_var)
    return config


def _palette_rows() -> list[tuple[str, list[StyledString]]]:
    regular = [StyledString(f"\\e[0;{c.param}m", c) for c in STANDARD_COLORS]
    bright = [StyledString(f"\\e[0;{c.bright.param}m", c.bright) for c in STANDARD_COLORS]
    bold = [StyledString(f"\\e[1;{c.param}m", c, bold=True) for c in STANDARD_COLORS]
    return [("regular", regular), ("bright", bright), ("bold", bold)]


# ---------------------------------------------------------------------------
# Subcommand: palette
# ---------------------------------------------------------------------------

def cmd_palette(args: argparse.Namespace, policy: StylePolicy) -> int:
    """Print the regular, bright and bold rows of the palette."""
    out = sys.stdout
    for _name, samples in _palette_rows():
        for i, sample in enumerate(samples):
            if i:
                out.write("  ")
            sample.render(out, policy)
        out.write("\n")
    return 0


# ---------------------------------------------------------------------------
# Subcommand: status
# ---------------------------------------------------------------------------

def cmd_status(args: argparse.Namespace, policy: StylePolicy) -> int:
    """Report whether styling is enabled."""
    forced = policy.forced
    enabled = policy.is_enabled()
    state = "enabled" if enabled else "disabled"
    if forced is not None:
        reason = "forced"
    else:
        reason = f"detected from terminal and {policy.env_var}"
    print(f"Color: {state} ({reason})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="gory",
        description="Show ANSI terminal colors.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a TOML file with a [color] table",
    )
    parser.add_argument(
        "--color", choices=["auto", "always", "never"],
        help="Override color detection (default: from config, else auto)",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("palette", help="Print every color")
    subparsers.add_parser("status", help="Show whether color output is enabled")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = _load_config(args)
    except FileNotFoundError:
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    commands = {
        "palette": cmd_palette,
        "status": cmd_status,
    }

    try:
        return commands[args.command](args, config.build_policy())
    except OSError as e:
        # RenderError is an OSError; so is a broken pipe on a separator write
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
