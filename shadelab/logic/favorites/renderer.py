#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/favorites/renderer.py

from typing import Sequence, Tuple

from shadelab.core import config as c
from shadelab.core.models import FavoriteColor
from shadelab.shared.preview import print_color_block


def render_favorites(entries: Sequence[Tuple[int, FavoriteColor]]) -> None:
    """Print (index, favorite) pairs; unnamed favorites show as '(unnamed)'."""
    print()
    for i, fav in entries:
        name = fav.name or f"{c.MSG_BOLD_COLORS['dim']}(unnamed){c.RESET}"
        label = f"{c.MSG_BOLD_COLORS['info']}{i:>3}{c.RESET} {name}"
        print_color_block(fav.color, label)
    print()
