#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/workspace/edits.py

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class PickColor:
    """Color chosen outright: a picker drag or a favorite click."""

    color: str


@dataclass(frozen=True)
class HexInput:
    """Keystroke in the hex text field."""

    text: str


@dataclass(frozen=True)
class CommitHexInput:
    """Hex field lost focus."""


@dataclass(frozen=True)
class ChannelEdit:
    """New raw value typed into one channel of one space."""

    space: str
    channel: str
    raw: Any


@dataclass(frozen=True)
class SelectShade:
    index: int


Edit = Union[PickColor, HexInput, CommitHexInput, ChannelEdit, SelectShade]
