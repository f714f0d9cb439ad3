#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/shades/renderer.py

from typing import Iterable, Optional, Tuple

from shadelab.core import config as c
from shadelab.core.shades import shade_label
from shadelab.shared.preview import print_color_block


def render_shades(
    shades: Tuple[str, ...],
    indices: Iterable[int],
    selected: Optional[int] = None,
) -> None:
    """Print the chosen ramp entries with their percentage labels."""
    print()
    for i in indices:
        label = f"{c.MSG_BOLD_COLORS['info']}{shade_label(i):>6}{c.RESET} {c.MSG_BOLD_COLORS['dim']}[{i:>3}]{c.RESET}"
        marker = f"  {c.MSG_BOLD_COLORS['success']}<- selected{c.RESET}" if i == selected else ""
        print_color_block(shades[i], label, marker=marker)
    print()


def render_locate(target_hex: str, index: int) -> None:
    print_color_block(target_hex, f"{c.BOLD_WHITE}located{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['info']}{'approx. index':<18}{c.RESET}{c.BOLD_WHITE}: {index} ({shade_label(index)}){c.RESET}")
    print()
