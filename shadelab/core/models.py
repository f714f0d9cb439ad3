#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/core/models.py

from typing import Any, Dict, NamedTuple, Optional


class RgbColor(NamedTuple):
    r: int
    g: int
    b: int


class HslColor(NamedTuple):
    h: int
    s: int
    l: int


class HsbColor(NamedTuple):
    h: int
    s: int
    b: int


class CmykColor(NamedTuple):
    c: int
    m: int
    y: int
    k: int


class FavoriteColor(NamedTuple):
    """A bookmarked color. The name may be empty."""

    color: str
    name: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"color": self.color, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Optional["FavoriteColor"]:
        """Build a favorite from a stored object, or None when it is malformed."""
        if not isinstance(data, dict):
            return None
        color = data.get("color")
        name = data.get("name", "")
        if not isinstance(color, str):
            return None
        if not isinstance(name, str):
            name = ""
        return cls(color=color, name=name)
