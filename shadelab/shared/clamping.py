#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp_range(v: float, min_v: float, max_v: float) -> float:
    if v != v:
        return min_v
    return max(min_v, min(max_v, v))


def _round_half_up(v: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(v + 0.5))
