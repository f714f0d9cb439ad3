#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/workspace/engine.py

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from shadelab.core import config as c
from shadelab.core import conversions as conv
from shadelab.core.models import CmykColor, HsbColor, HslColor, RgbColor
from shadelab.core.shades import generate_shades
from shadelab.shared.sanitizer import channel_range, parse_channel_value
from .edits import ChannelEdit, CommitHexInput, Edit, HexInput, PickColor, SelectShade


@dataclass(frozen=True)
class WorkspaceState:
    """
    One consistent snapshot of the selection.

    `color` is the canonical value; every space is a view derived from it,
    except the space the last ChannelEdit targeted, which keeps the value
    the user typed.
    """

    color: str
    hex_input: str
    rgb: RgbColor
    hsl: HslColor
    hsb: HsbColor
    cmyk: CmykColor
    shades: Tuple[str, ...]
    selected_shade: Optional[int]
    origin: str = "initial"

    def space(self, name: str):
        return getattr(self, name)


def initial_state(color: str = c.DEFAULT_COLOR) -> WorkspaceState:
    canonical = conv.normalize_hex(color) or c.DEFAULT_COLOR
    rgb = conv.parse_hex(canonical)
    return WorkspaceState(
        color=canonical,
        hex_input=canonical,
        rgb=rgb,
        hsl=conv.rgb_to_hsl(*rgb),
        hsb=conv.rgb_to_hsb(*rgb),
        cmyk=conv.rgb_to_cmyk(*rgb),
        shades=generate_shades(canonical),
        selected_shade=c.SHADE_BASE_INDEX,
    )


def _derive(
    state: WorkspaceState,
    rgb: RgbColor,
    origin: str,
    keep_space: Optional[str] = None,
    kept_value=None,
    from_ramp: bool = False,
    selected_shade: Optional[int] = None,
) -> WorkspaceState:
    """Canonical color -> every other space -> ramp, as one new snapshot."""
    color = conv.format_hex(*rgb)
    spaces = {name: conv.FROM_RGB[name](*rgb) for name in c.SPACE_NAMES}
    if keep_space is not None:
        spaces[keep_space] = kept_value

    if from_ramp:
        shades = state.shades
    else:
        shades = generate_shades(color)
        selected_shade = c.SHADE_BASE_INDEX

    return replace(
        state,
        color=color,
        hex_input=color,
        shades=shades,
        selected_shade=selected_shade,
        origin=origin,
        **spaces,
    )


def _apply_channel_edit(state: WorkspaceState, edit: ChannelEdit) -> WorkspaceState:
    min_v, max_v = channel_range(edit.space, edit.channel)
    value = parse_channel_value(edit.raw, min_v, max_v)

    current = state.space(edit.space)
    edited = current._replace(**{edit.channel: value})
    rgb = conv.TO_RGB[edit.space](*edited)
    return _derive(state, rgb, origin=edit.space, keep_space=edit.space, kept_value=edited)


def reduce(state: WorkspaceState, edit: Edit) -> WorkspaceState:
    """
    Compute the state that follows `edit`.

    Invalid input never raises: a bad hex or an out-of-ramp index leaves
    the color as it was. Only an unknown space or channel name raises
    ValueError.
    """
    if isinstance(edit, PickColor):
        rgb = conv.parse_hex(edit.color)
        if rgb is None:
            return state
        return _derive(state, rgb, origin="pick")

    if isinstance(edit, HexInput):
        rgb = conv.parse_hex(edit.text)
        if rgb is None:
            return replace(state, hex_input=edit.text)
        new_state = _derive(state, rgb, origin="hex")
        return replace(new_state, hex_input=edit.text)

    if isinstance(edit, CommitHexInput):
        if conv.is_hex(state.hex_input):
            return state
        return replace(state, hex_input=state.color)

    if isinstance(edit, ChannelEdit):
        return _apply_channel_edit(state, edit)

    if isinstance(edit, SelectShade):
        if not 0 <= edit.index < len(state.shades):
            return state
        rgb = conv.parse_hex(state.shades[edit.index])
        return _derive(state, rgb, origin="shade", from_ramp=True, selected_shade=edit.index)

    raise TypeError(f"unsupported edit: {edit!r}")
