#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/preview.py

import os
import re
import sys

from shadelab.core import config as c
from shadelab.core.conversions import parse_hex


def ensure_truecolor() -> None:
    """Ensure the COLORTERM environment variable is set to truecolor."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n", marker: str = "") -> None:
    rgb = parse_hex(hex_code)
    if rgb is None:
        return
    r, g, b = rgb
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m                {c.RESET}  "
        f"{c.BOLD_WHITE}{hex_code}{c.RESET}{marker}",
        end=end,
    )
