#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/color/engine.py

import argparse

from shadelab.core.shades import shade_label
from shadelab.logic.workspace.state import ColorWorkspace
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color inspector"""
    base_hex, title = resolve_color_input(args)
    workspace = ColorWorkspace(base_hex)

    shade = getattr(args, "shade", None)
    if shade is not None:
        workspace.select_shade(shade)
        title = f"{title} {shade_label(shade)}"

    render_color_info(
        workspace.state,
        title,
        hide_bars=getattr(args, "hide_bars", False),
        spaces=getattr(args, "spaces", None),
    )
