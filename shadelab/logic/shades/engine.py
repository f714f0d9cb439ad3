#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/shades/engine.py

import argparse
from typing import List

from shadelab.core import config as c
from shadelab.core.shades import closest_shade_index
from shadelab.logic.color.resolver import resolve_color_input
from shadelab.logic.workspace.state import ColorWorkspace
from .renderer import render_locate, render_shades


def visible_indices(step: int, selected=None) -> List[int]:
    """Every step-th ramp index, always including both ends, the base and the selection."""
    step = max(1, step)
    keep = set(range(0, c.SHADE_COUNT, step))
    keep.update({0, c.SHADE_BASE_INDEX, c.SHADE_COUNT - 1})
    if selected is not None:
        keep.add(selected)
    return sorted(keep)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the shades command"""
    base_hex, _ = resolve_color_input(args)
    workspace = ColorWorkspace(base_hex)

    if args.select is not None:
        workspace.select_shade(args.select)

    state = workspace.state
    render_shades(state.shades, visible_indices(args.step, state.selected_shade), state.selected_shade)

    if args.select is not None:
        print(f"{c.MSG_BOLD_COLORS['info']}{'selected':<18}{c.RESET}{c.BOLD_WHITE}: {state.color}{c.RESET}")
        print()

    if args.locate:
        render_locate(args.locate, closest_shade_index(args.locate))
