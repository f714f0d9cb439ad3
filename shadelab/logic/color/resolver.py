#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/color/resolver.py

import argparse
import random
import sys
from typing import Tuple

from shadelab.core import config as c
from shadelab.core import conversions as conv
from shadelab.shared.logger import log


def resolve_color_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Resolve raw CLI input into a canonical hex and a title."""
    if getattr(args, "seed", None) is not None:
        random.seed(args.seed)

    if getattr(args, "random", False):
        dec = random.randint(0, c.MAX_DEC)
        return conv.format_hex(dec >> 16, (dec >> 8) & 0xFF, dec & 0xFF), "random"

    if getattr(args, "hex", None):
        return args.hex, "current"

    log("error", "one of the arguments -H/--hex -r/--random is required")
    log("info", "use 'shadelab --help' for more information")
    sys.exit(2)
