#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/favorites/store.py

import json
import os
from typing import List, Optional, Protocol, Sequence

from shadelab.core import config as c
from shadelab.core.conversions import is_hex
from shadelab.core.models import FavoriteColor
from shadelab.shared.logger import log


class FavoritesStore(Protocol):
    def load(self) -> List[FavoriteColor]:
        ...

    def save(self, favorites: Sequence[FavoriteColor]) -> bool:
        """Persist the whole list; False when it could not be written."""
        ...


class MemoryFavoritesStore:
    """Keeps favorites in process; used by tests and throwaway sessions."""

    def __init__(self, favorites: Optional[Sequence[FavoriteColor]] = None):
        self._favorites = list(favorites or [])

    def load(self) -> List[FavoriteColor]:
        return list(self._favorites)

    def save(self, favorites: Sequence[FavoriteColor]) -> bool:
        self._favorites = list(favorites)
        return True


class JsonFileFavoritesStore:
    """
    Favorites as a JSON array of {"color", "name"} objects in one file.

    Unreadable files and malformed entries are reported and skipped, never
    raised. A file that did not load cleanly is moved to '<path>.bak'
    before it is first overwritten. Writes go through a temporary file and
    os.replace, and a failed write is logged. Saving an empty list removes
    the file.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)
        self._needs_backup = False

    @property
    def backup_path(self) -> str:
        return self.path + ".bak"

    def load(self) -> List[FavoriteColor]:
        self._needs_backup = False
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            log("warning", f"could not read favorites from '{self.path}': {exc}")
            self._needs_backup = True
            return []

        if not isinstance(data, list):
            log("warning", f"favorites file '{self.path}' does not hold a list, ignoring it")
            self._needs_backup = True
            return []

        favorites = []
        for i, item in enumerate(data):
            fav = FavoriteColor.from_dict(item)
            if fav is None or not is_hex(fav.color):
                log("warning", f"skipping malformed favorite #{i} in '{self.path}'")
                self._needs_backup = True
                continue
            favorites.append(fav)
        return favorites

    def _backup(self) -> None:
        if not os.path.isfile(self.path):
            return
        os.replace(self.path, self.backup_path)
        log("warning", f"kept the unreadable favorites file as '{self.backup_path}'")

    def _write(self, favorites: Sequence[FavoriteColor]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as handle:
                json.dump([fav.to_dict() for fav in favorites], handle, indent=2)
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def save(self, favorites: Sequence[FavoriteColor]) -> bool:
        """Persist the list; False (after logging) when the file could not be written."""
        try:
            if self._needs_backup:
                self._backup()
                self._needs_backup = False
            if favorites:
                self._write(favorites)
            elif os.path.isfile(self.path):
                os.remove(self.path)
        except OSError as exc:
            log("error", f"could not save favorites to '{self.path}': {exc}")
            return False
        return True


def default_store_path() -> str:
    return os.environ.get(c.FAVORITES_ENV_VAR) or c.FAVORITES_DEFAULT_FILE
