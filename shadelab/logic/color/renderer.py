#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/color/renderer.py

from shadelab.core import config as c
from shadelab.logic.workspace.engine import WorkspaceState
from shadelab.shared.formatting import format_colorspace
from shadelab.shared.preview import print_color_block


def _draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw a ANSI-colored bar representation of a value."""
    total_len = 16
    percent = min(max(val, 0), max_val) / max_val
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    reset_ansi = "\033[0m"
    empty_ansi = "\033[90m"

    return (
        f"{color_ansi}{'█' * filled}{reset_ansi}"
        f"{empty_ansi}{'░' * empty}{reset_ansi}"
    )


def _print_space(name: str, value, bars, hide_bars: bool) -> None:
    print(f"\n{c.MSG_BOLD_COLORS['info']}{name:<18}{c.RESET}{c.BOLD_WHITE}: {format_colorspace(name, *value)}{c.RESET}")
    if hide_bars:
        return
    for (label, max_val, color), v in zip(bars, value):
        print(f"                    {c.BOLD_WHITE}{label}{c.RESET} {_draw_bar(v, max_val, *color)} {c.BOLD_WHITE}{v:>4}{c.RESET}")


# Channel label, channel maximum and bar color per space
SPACE_BARS = {
    "rgb": [("R", 255, (255, 60, 60)), ("G", 255, (60, 255, 60)), ("B", 255, (60, 80, 255))],
    "hsl": [("H", 360, (255, 200, 0)), ("S", 100, (0, 200, 255)), ("L", 100, (200, 200, 200))],
    "hsb": [("H", 360, (255, 200, 0)), ("S", 100, (0, 200, 255)), ("B", 100, (200, 200, 200))],
    "cmyk": [("C", 100, (0, 255, 255)), ("M", 100, (255, 0, 255)), ("Y", 100, (255, 255, 0)), ("K", 100, (100, 100, 100))],
}


def render_color_info(
    state: WorkspaceState,
    title: str = "current",
    hide_bars: bool = False,
    spaces=None,
) -> None:
    """
    Strictly prints a workspace snapshot. Data must be pre-calculated by the engine.

    `spaces` limits the listing to the named spaces, still in canonical order;
    None prints all of them.
    """
    print()
    print_color_block(state.color, f"{c.BOLD_WHITE}{title}{c.RESET}")

    print(f"\n{c.MSG_BOLD_COLORS['info']}{'hex':<18}{c.RESET}{c.BOLD_WHITE}: {state.color}{c.RESET}")
    wanted = set(spaces) if spaces else set(c.SPACE_NAMES)
    for name in c.SPACE_NAMES:
        if name not in wanted:
            continue
        _print_space(name, state.space(name), SPACE_BARS[name], hide_bars)

    print()
