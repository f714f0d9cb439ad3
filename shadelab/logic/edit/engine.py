#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/edit/engine.py

import argparse
import sys

from shadelab.core import config as c
from shadelab.logic.color.renderer import render_color_info
from shadelab.logic.color.resolver import resolve_color_input
from shadelab.logic.workspace.state import ColorWorkspace
from shadelab.shared.logger import log
from shadelab.shared.preview import print_color_block


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Apply one channel edit to the input color and show the re-derived spaces."""
    base_hex, title = resolve_color_input(args)
    workspace = ColorWorkspace(base_hex)

    try:
        state = workspace.set_channel(args.space, args.channel, args.value)
    except ValueError as exc:
        log("error", str(exc))
        channels = ", ".join(c.CHANNEL_RANGES[args.space])
        log("info", f"channels for {args.space}: {channels}")
        sys.exit(2)

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    render_color_info(state, "edited", hide_bars=getattr(args, "hide_bars", False))
