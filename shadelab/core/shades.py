#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/shades.py

from typing import Tuple

from . import config as c
from .conversions import format_hex, parse_hex
from shadelab.shared.clamping import _round_half_up


def generate_shades(base: str) -> Tuple[str, ...]:
    """
    Build the 201-step ramp white -> base -> black.

    Index 0 is pure white, index 100 is the base color and index 200 is
    pure black. An unparsable base yields an empty ramp.
    """
    rgb = parse_hex(base)
    if rgb is None:
        return ()

    shades = []

    # White (-100%) to the base color (0%)
    for i in range(-c.SHADE_HALF_STEPS, 1):
        factor = (i + c.SHADE_HALF_STEPS) / c.SHADE_HALF_STEPS
        shades.append(
            format_hex(
                *(_round_half_up(c.RGB_MAX * (c.UNIT - factor) + ch * factor) for ch in rgb)
            )
        )

    # Base color (0%) to black (100%)
    for i in range(1, c.SHADE_HALF_STEPS + 1):
        factor = i / c.SHADE_HALF_STEPS
        shades.append(format_hex(*(_round_half_up(ch * (c.UNIT - factor)) for ch in rgb)))

    return tuple(shades)


def closest_shade_position(target: str) -> int:
    """
    Estimate where a color sits on a white -> black ramp, in [-100, 100].

    Only the target's own channel extremes are used; no ramp is generated
    or searched, so the result is indicative rather than exact.
    """
    rgb = parse_hex(target)
    if rgb is None:
        return 0

    max_channel = max(rgb)
    min_channel = min(rgb)

    if max_channel > c.LOCATOR_WHITE_THRESHOLD:
        factor = (c.RGB_MAX - max_channel) / c.RGB_MAX
        return _round_half_up(-c.SHADE_HALF_STEPS * factor)

    factor = min_channel / c.RGB_MAX
    return _round_half_up(c.SHADE_HALF_STEPS * (c.UNIT - factor))


def closest_shade_index(target: str) -> int:
    """Ramp index in [0, 200] for closest_shade_position; 100 for bad input."""
    return closest_shade_position(target) + c.SHADE_BASE_INDEX


def shade_label(index: int) -> str:
    return f"{index - c.SHADE_BASE_INDEX}%"
