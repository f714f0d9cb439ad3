#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/__init__.py

from .conversions import (
    cmyk_to_rgb,
    format_hex,
    hsb_to_rgb,
    hsl_to_rgb,
    parse_hex,
    rgb_to_cmyk,
    rgb_to_hsb,
    rgb_to_hsl,
)
from .models import CmykColor, FavoriteColor, HsbColor, HslColor, RgbColor
from .shades import closest_shade_index, closest_shade_position, generate_shades

__all__ = [
    "parse_hex",
    "format_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "generate_shades",
    "closest_shade_index",
    "closest_shade_position",
    "RgbColor",
    "HslColor",
    "HsbColor",
    "CmykColor",
    "FavoriteColor",
]
