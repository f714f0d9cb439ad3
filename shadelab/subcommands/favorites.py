#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/favorites.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.shared.logger import ShadelabArgumentParser
from shadelab.shared.sanitizer import INPUT_HANDLERS
from shadelab.shared.preview import ensure_truecolor
from shadelab.logic.favorites.handler import run


def get_favorites_parser() -> argparse.ArgumentParser:
    """Create argument parser for favorites command."""
    parser = ShadelabArgumentParser(
        prog="shadelab favorites",
        description="shadelab favorites: bookmark colors under optional names",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--store",
        default=None,
        help=f"favorites JSON file (default: ${c.FAVORITES_ENV_VAR} or {c.FAVORITES_DEFAULT_FILE})",
    )
    actions = parser.add_subparsers(dest="action", metavar="ACTION")

    list_parser = actions.add_parser("list", help="list favorites, newest first")
    list_parser.add_argument("-q", "--search", default="", help="only names containing this text")

    add_parser = actions.add_parser("add", help="bookmark a color")
    add_parser.add_argument("-H", "--hex", required=True, type=INPUT_HANDLERS["hex"], help="color as #RRGGBB")
    add_parser.add_argument("-n", "--name", default="", help="optional name")

    remove_parser = actions.add_parser("remove", help="delete a favorite by index")
    remove_parser.add_argument("index", type=INPUT_HANDLERS["favorite_index"], help="index from 'list'")

    rename_parser = actions.add_parser("rename", help="rename a favorite by index")
    rename_parser.add_argument("index", type=INPUT_HANDLERS["favorite_index"], help="index from 'list'")
    rename_parser.add_argument("name", help="new name (may be empty)")

    actions.add_parser("clear", help="delete every favorite")
    return parser


def main() -> None:
    """Main entry point for favorites command."""
    parser = get_favorites_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args, parser)


if __name__ == "__main__":
    main()
