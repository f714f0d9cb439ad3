#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/edit.py

import argparse
import sys

from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.preview import ensure_truecolor
from shadelab.logic.edit.engine import run


def get_edit_parser() -> argparse.ArgumentParser:
    """Create argument parser for edit command."""
    parser = ShadelabArgumentParser(
        prog="shadelab edit",
        description="shadelab edit: change one channel of one color space and re-derive the rest",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="starting color as #RRGGBB ('#' optional)"
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="start from a random color"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-s",
        "--space",
        required=True,
        type=INPUT_HANDLERS["space"],
        help="color space to edit: rgb, hsl, hsb, cmyk"
    )
    parser.add_argument(
        "-c",
        "--channel",
        required=True,
        type=INPUT_HANDLERS["channel"],
        help="channel letter within the space (e.g. r, h, l, k)"
    )
    parser.add_argument(
        "-V",
        "--value",
        required=True,
        help="new channel value; unparsable text counts as 0, out-of-range values are clamped"
    )
    parser.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual channel bars"
    )
    return parser


def main() -> None:
    """Main entry point for edit command."""
    parser = get_edit_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args, parser)


if __name__ == "__main__":
    main()
