#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    """Copy string for a color space, as pasted into CSS-like contexts."""
    if fmt == 'hex':
        return str(args[0])
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h}, {s}%, {l}%)"
    elif fmt == 'hsb':
        h, s, b = args
        return f"hsb({h}, {s}%, {b}%)"
    elif fmt == 'cmyk':
        c, m, y, k = args
        return f"cmyk({c}%, {m}%, {y}%, {k}%)"

    return ""
