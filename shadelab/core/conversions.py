#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/conversions.py

import functools
import re
from typing import Optional, Tuple

from . import config as c
from .models import CmykColor, HsbColor, HslColor, RgbColor
from shadelab.shared.clamping import _clamp01, _clamp_range, _round_half_up

_HEX_PATTERN = re.compile(r"^#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})$")


# ==========================================
# Hex Codec
# ==========================================


def parse_hex(value) -> Optional[RgbColor]:
    """Parse '#RRGGBB' into an RgbColor. Anything else yields None."""
    if not isinstance(value, str):
        return None
    match = _HEX_PATTERN.fullmatch(value)
    if not match:
        return None
    return RgbColor(*(int(part, 16) for part in match.groups()))


def format_hex(r: int, g: int, b: int) -> str:
    """Render integral channels as lowercase '#rrggbb'."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def is_hex(value) -> bool:
    return parse_hex(value) is not None


def normalize_hex(value) -> Optional[str]:
    """Canonical lowercase form of a valid hex color, else None."""
    rgb = parse_hex(value)
    if rgb is None:
        return None
    return format_hex(*rgb)


# ==========================================
# Shared helpers
# ==========================================


def _to_channel(v: float) -> int:
    """Round a 0..1 fraction to a clamped 0..255 channel."""
    return int(_clamp_range(_round_half_up(v * c.RGB_MAX), 0, c.RGB_MAX))


def _to_percent(v: float) -> int:
    return _round_half_up(_clamp01(v) * c.PERCENT_MAX)


def _hue_fraction(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    """Hue as a fraction of one turn from the max-channel branch."""
    if cmax == r_f:
        h = ((g_f - b_f) / delta) % c.HUE_SECTORS
    elif cmax == g_f:
        h = (b_f - r_f) / delta + c.HUE_G_OFFSET
    else:
        h = (r_f - g_f) / delta + c.HUE_B_OFFSET
    return h / c.HUE_SECTORS


def _normalize_rgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return (
        _clamp_range(r, 0, c.RGB_MAX) / c.RGB_MAX,
        _clamp_range(g, 0, c.RGB_MAX) / c.RGB_MAX,
        _clamp_range(b, 0, c.RGB_MAX) / c.RGB_MAX,
    )


# ==========================================
# Space Converters
# ==========================================


def rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    """Convert RGB to HSL (degrees, percent, percent)."""
    r_f, g_f, b_f = _normalize_rgb(r, g, b)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        if L > 0.5:
            s = delta / (c.DIV_2 - cmax - cmin)
        else:
            s = delta / (cmax + cmin)
        h = _hue_fraction(r_f, g_f, b_f, cmax, delta)
    return HslColor(
        _round_half_up(_clamp01(h) * c.HUE_MAX),
        _to_percent(s),
        _to_percent(L),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += c.UNIT
    if t > 1:
        t -= c.UNIT
    if t < c.HUE_BREAK_1:
        return p + (q - p) * c.HUE_SECTORS * t
    if t < c.HUE_BREAK_2:
        return q
    if t < c.HUE_BREAK_3:
        return p + (q - p) * (c.HUE_BREAK_3 - t) * c.HUE_SECTORS
    return p


def hsl_to_rgb(h: float, s: float, L: float) -> RgbColor:
    """Convert HSL (degrees, percent, percent) to RGB."""
    h = _clamp_range(h, 0, c.HUE_MAX) / c.HUE_MAX
    s = _clamp_range(s, 0, c.PERCENT_MAX) / c.PERCENT_MAX
    L = _clamp_range(L, 0, c.PERCENT_MAX) / c.PERCENT_MAX

    if s == 0:
        gray = _to_channel(L)
        return RgbColor(gray, gray, gray)

    q = L * (c.UNIT + s) if L < 0.5 else L + s - L * s
    p = c.DIV_2 * L - q
    return RgbColor(
        _to_channel(_hue_to_channel(p, q, h + c.HUE_CHANNEL_SHIFT)),
        _to_channel(_hue_to_channel(p, q, h)),
        _to_channel(_hue_to_channel(p, q, h - c.HUE_CHANNEL_SHIFT)),
    )


def rgb_to_hsb(r: int, g: int, b: int) -> HsbColor:
    """Convert RGB to HSB (degrees, percent, percent)."""
    r_f, g_f, b_f = _normalize_rgb(r, g, b)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    v = cmax
    s = 0.0 if cmax == 0 else delta / cmax
    h = 0.0 if delta == 0 else _hue_fraction(r_f, g_f, b_f, cmax, delta)
    return HsbColor(
        _round_half_up(_clamp01(h) * c.HUE_MAX),
        _to_percent(s),
        _to_percent(v),
    )


def hsb_to_rgb(h: float, s: float, v: float) -> RgbColor:
    """Convert HSB (degrees, percent, percent) to RGB using 60 degree sectors."""
    h = _clamp_range(h, 0, c.HUE_MAX) / c.HUE_MAX
    s = _clamp_range(s, 0, c.PERCENT_MAX) / c.PERCENT_MAX
    v = _clamp_range(v, 0, c.PERCENT_MAX) / c.PERCENT_MAX

    if s == 0:
        gray = _to_channel(v)
        return RgbColor(gray, gray, gray)

    sector = int(h * c.HUE_SECTORS)
    f = h * c.HUE_SECTORS - sector
    p = v * (c.UNIT - s)
    q = v * (c.UNIT - f * s)
    t = v * (c.UNIT - (c.UNIT - f) * s)

    sector %= c.HUE_SECTORS
    if sector == 0:
        r_f, g_f, b_f = v, t, p
    elif sector == 1:
        r_f, g_f, b_f = q, v, p
    elif sector == 2:
        r_f, g_f, b_f = p, v, t
    elif sector == 3:
        r_f, g_f, b_f = p, q, v
    elif sector == 4:
        r_f, g_f, b_f = t, p, v
    else:
        r_f, g_f, b_f = v, p, q
    return RgbColor(_to_channel(r_f), _to_channel(g_f), _to_channel(b_f))


def rgb_to_cmyk(r: int, g: int, b: int) -> CmykColor:
    """Convert RGB to CMYK percentages. Pure black yields c = m = y = 0."""
    r_norm, g_norm, b_norm = _normalize_rgb(r, g, b)
    k = c.UNIT - max(r_norm, g_norm, b_norm)
    if k >= c.UNIT:
        return CmykColor(0, 0, 0, int(c.PERCENT_MAX))
    denom = c.UNIT - k
    cy = (c.UNIT - r_norm - k) / denom
    m = (c.UNIT - g_norm - k) / denom
    y = (c.UNIT - b_norm - k) / denom
    return CmykColor(_to_percent(cy), _to_percent(m), _to_percent(y), _to_percent(k))


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RgbColor:
    """Convert CMYK percentages to RGB."""
    cy, m, y, k = (
        _clamp_range(v, 0, c.PERCENT_MAX) / c.PERCENT_MAX for v in (cy, m, y, k)
    )
    return RgbColor(
        _to_channel((c.UNIT - cy) * (c.UNIT - k)),
        _to_channel((c.UNIT - m) * (c.UNIT - k)),
        _to_channel((c.UNIT - y) * (c.UNIT - k)),
    )


# ==========================================
# RGB Input
# ==========================================


def clamp_rgb(r: float, g: float, b: float) -> RgbColor:
    """Clamp, then round half-up, arbitrary RGB components; the edit path for the rgb space."""
    return RgbColor(
        _round_half_up(_clamp_range(r, 0, c.RGB_MAX)),
        _round_half_up(_clamp_range(g, 0, c.RGB_MAX)),
        _round_half_up(_clamp_range(b, 0, c.RGB_MAX)),
    )


# Numeric converters are pure; the hex codec takes arbitrary input and stays uncached
for _name in (
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
):
    globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(globals()[_name])


# Space name -> converter, RGB being the pivot of every pair
TO_RGB = {
    "rgb": clamp_rgb,
    "hsl": hsl_to_rgb,
    "hsb": hsb_to_rgb,
    "cmyk": cmyk_to_rgb,
}

FROM_RGB = {
    "rgb": clamp_rgb,
    "hsl": rgb_to_hsl,
    "hsb": rgb_to_hsb,
    "cmyk": rgb_to_cmyk,
}
