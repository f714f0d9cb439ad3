#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/shades.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.preview import ensure_truecolor
from shadelab.logic.shades.engine import run


def get_shades_parser() -> argparse.ArgumentParser:
    """Create argument parser for shades command."""
    parser = ShadelabArgumentParser(
        prog="shadelab shades",
        description="shadelab shades: 201-step ramp from white through a color to black",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="base color as #RRGGBB ('#' optional)"
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="use a random base color"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-S",
        "--step",
        type=INPUT_HANDLERS["shade_step"],
        default=c.DEFAULT_SHADE_STEP,
        help=f"print every N-th shade (default: {c.DEFAULT_SHADE_STEP}, 1 prints all {c.SHADE_COUNT})",
    )
    parser.add_argument(
        "--select",
        type=INPUT_HANDLERS["shade_index"],
        default=None,
        help=f"select a ramp entry by index (0 to {c.SHADE_COUNT - 1}); the ramp is kept",
    )
    parser.add_argument(
        "-L",
        "--locate",
        type=INPUT_HANDLERS["hex"],
        default=None,
        help="report the approximate ramp index of another color",
    )
    return parser


def main() -> None:
    """Main entry point for shades command."""
    parser = get_shades_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args, parser)


if __name__ == "__main__":
    main()
