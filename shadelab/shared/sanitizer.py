#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/sanitizer.py

import argparse
import re
import sys
from typing import Optional

from shadelab.core import config as c
from shadelab.core.conversions import normalize_hex
from .clamping import _clamp_range

# Leading integer the way a text field reads it: optional sign, then digits
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _extract_leading_int(value) -> Optional[int]:
    """
    Reads the integer prefix of a string ('42px' -> 42, '-7' -> -7).
    Returns None when the string does not start with a number.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_channel_value(value, min_v: int, max_v: int) -> int:
    """
    Turns raw single-channel input into a usable value.

    Unparsable input counts as 0, and the result is always clamped into
    [min_v, max_v]; nothing is ever rejected.
    """
    val = _extract_leading_int(value)
    if val is None:
        val = 0
    return int(_clamp_range(val, min_v, max_v))


def channel_range(space: str, channel: str):
    """(min, max) for a channel of an editable space; ValueError if unknown."""
    channels = c.CHANNEL_RANGES.get(space)
    if channels is None:
        raise ValueError(f"unknown color space '{space}'")
    if channel not in channels:
        raise ValueError(f"unknown channel '{channel}' for color space '{space}'")
    return channels[channel]


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for '#RRGGBB' CLI arguments; the '#' may be omitted on the command line."""
    raw = str(v).strip()
    if not raw.startswith("#"):
        raw = "#" + raw
    cleaned = normalize_hex(raw)
    if cleaned is None:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_space(v: str) -> str:
    cleaned = "".join(re.findall(r"[a-z]", str(v).lower()))
    if cleaned == "hsv":
        cleaned = "hsb"
    if cleaned not in c.SPACE_NAMES:
        raise argparse.ArgumentTypeError(
            f"invalid color space: '{_sanitize_for_log(v)}' (choose from {', '.join(c.SPACE_NAMES)})"
        )
    return cleaned


def handle_channel(v: str) -> str:
    cleaned = "".join(re.findall(r"[a-z]", str(v).lower()))
    if len(cleaned) != 1:
        raise argparse.ArgumentTypeError(f"invalid channel: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_leading_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        return int(_clamp_range(val, min_v, max_v))
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "space": handle_space,
    "channel": handle_channel,
    "shade_index": handle_int_range(0, c.SHADE_COUNT - 1),
    "shade_step": handle_int_range(1, c.SHADE_COUNT - 1),
    "favorite_index": handle_int_range(0, sys.maxsize),
}
