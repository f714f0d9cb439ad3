#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/config.py

# ==========================================
# Color Model Constants
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT_MAX = 100.0                # Upper bound for saturation, lightness, brightness and CMYK inks
HUE_SECTORS = 6                    # Number of 60 degree sectors in the hue circle
HUE_G_OFFSET = 2.0                 # Sector offset when green is the maximal channel
HUE_B_OFFSET = 4.0                 # Sector offset when blue is the maximal channel

# HSL hue-to-channel breakpoints (fractions of one hue turn)
HUE_BREAK_1 = 1.0 / 6.0
HUE_BREAK_2 = 1.0 / 2.0
HUE_BREAK_3 = 2.0 / 3.0
HUE_CHANNEL_SHIFT = 1.0 / 3.0      # Phase shift between the red, green and blue helpers

# Channel ranges as (min, max) per editable space
CHANNEL_RANGES = {
    "rgb": {"r": (0, 255), "g": (0, 255), "b": (0, 255)},
    "hsl": {"h": (0, 360), "s": (0, 100), "l": (0, 100)},
    "hsb": {"h": (0, 360), "s": (0, 100), "b": (0, 100)},
    "cmyk": {"c": (0, 100), "m": (0, 100), "y": (0, 100), "k": (0, 100)},
}

SPACE_NAMES = ("rgb", "hsl", "hsb", "cmyk")

# ==========================================
# Shade Ramp Geometry
# ==========================================

SHADE_HALF_STEPS = 100             # Steps on each side of the base color
SHADE_COUNT = 2 * SHADE_HALF_STEPS + 1
SHADE_BASE_INDEX = SHADE_HALF_STEPS
LOCATOR_WHITE_THRESHOLD = 128      # Max channel above this places a color on the white half

# ==========================================
# Application Defaults
# ==========================================

DEFAULT_COLOR = "#3f51b5"
MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
DEFAULT_SHADE_STEP = 10            # Ramp stride used by 'shades' when printing

FAVORITES_ENV_VAR = "SHADELAB_FAVORITES"
FAVORITES_DEFAULT_FILE = "~/.shadelab_favorites.json"

# ==========================================
# CLI UI
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
