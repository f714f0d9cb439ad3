#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/favorites/engine.py

from typing import Tuple

from shadelab.core.conversions import normalize_hex
from shadelab.core.models import FavoriteColor
from .store import FavoritesStore


class Favorites:
    """
    Ordered list of bookmarked colors, newest first.

    Every change is written through to the injected store. Entries are
    replaced rather than mutated.
    """

    def __init__(self, store: FavoritesStore):
        self._store = store
        self.saved = True
        self._items = tuple(
            fav._replace(color=normalize_hex(fav.color))
            for fav in store.load()
            if normalize_hex(fav.color) is not None
        )

    @property
    def items(self) -> Tuple[FavoriteColor, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def _commit(self, items) -> None:
        # The in-memory list changes even when the store refuses the write
        self._items = tuple(items)
        self.saved = self._store.save(list(self._items)) is not False

    def contains(self, color: str) -> bool:
        canonical = normalize_hex(color)
        return canonical is not None and any(fav.color == canonical for fav in self._items)

    def add(self, color: str, name: str = "") -> bool:
        """Prepend a color; False if it is invalid or already bookmarked."""
        canonical = normalize_hex(color)
        if canonical is None or self.contains(canonical):
            return False
        self._commit((FavoriteColor(canonical, name),) + self._items)
        return True

    def _position(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError(f"no favorite at index {index}")
        return index

    def remove(self, index: int) -> FavoriteColor:
        index = self._position(index)
        removed = self._items[index]
        self._commit(self._items[:index] + self._items[index + 1:])
        return removed

    def rename(self, index: int, name: str) -> FavoriteColor:
        index = self._position(index)
        renamed = self._items[index]._replace(name=name)
        items = list(self._items)
        items[index] = renamed
        self._commit(items)
        return renamed

    def clear(self) -> None:
        self._commit(())

    def filter(self, query: str = "") -> Tuple[FavoriteColor, ...]:
        """Case-insensitive substring match on names; '' keeps everything."""
        needle = (query or "").lower()
        return tuple(fav for fav in self._items if needle in fav.name.lower())
