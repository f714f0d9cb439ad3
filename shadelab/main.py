#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/main.py

import argparse
import sys

from shadelab import __version__
from shadelab.core import config as c
from shadelab.logic.color import engine
from shadelab.subcommands.command_registry import SUBCOMMANDS
from shadelab.shared.logger import log, ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.preview import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the inspector (the command without a subcommand)."""
    parser = ShadelabArgumentParser(
        prog="shadelab",
        description=(
            "shadelab: one color as hex, rgb, hsl, hsb and cmyk, with its white-to-black ramp\n"
            f"subcommands: {', '.join(SUBCOMMANDS)} (use 'shadelab CMD -h')"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"shadelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show this help followed by the help of every subcommand",
    )

    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="color as #RRGGBB ('#' optional, any case)",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="inspect a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help="seed for reproducibility of random",
    )

    view_group = parser.add_argument_group("view")
    view_group.add_argument(
        "-sh",
        "--shade",
        type=INPUT_HANDLERS["shade_index"],
        default=None,
        help=f"inspect entry N of the color's ramp instead (0 white, {c.SHADE_BASE_INDEX} the color, {c.SHADE_COUNT - 1} black)",
    )
    view_group.add_argument(
        "-sp",
        "--space",
        dest="spaces",
        action="append",
        type=INPUT_HANDLERS["space"],
        default=None,
        help=f"only print this space; repeatable ({', '.join(c.SPACE_NAMES)})",
    )
    view_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual channel bars",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def _print_full_help(parser: argparse.ArgumentParser) -> None:
    parser.print_help()
    for name, module in SUBCOMMANDS.items():
        getter = getattr(module, f"get_{name}_parser", None)
        if getter is None:
            log("info", f"help for '{name}' not available")
            continue
        print("\n" * 2)
        getter().print_help()


def handle_color_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate routing, then hand the parsed inspector arguments to the engine."""
    if args.help_full:
        _print_full_help(parser)
        sys.exit(0)

    # A subcommand name only routes when it comes first
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    engine.run(args, parser)


def main() -> None:
    """Main entry point for shadelab CLI"""
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args, parser)


if __name__ == "__main__":
    main()
