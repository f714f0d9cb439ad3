#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/favorites/handler.py

import argparse
import sys

from shadelab.shared.logger import log
from .engine import Favorites
from .renderer import render_favorites
from .store import JsonFileFavoritesStore, default_store_path


def _exit_no_index(index: int, favorites: Favorites) -> None:
    log("error", f"no favorite at index {index} ({len(favorites)} saved)")
    sys.exit(2)


def _exit_if_unsaved(favorites: Favorites) -> None:
    # The store already logged why
    if not favorites.saved:
        sys.exit(1)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Dispatch a favorites action against the JSON file store."""
    store = JsonFileFavoritesStore(args.store or default_store_path())
    favorites = Favorites(store)
    action = args.action or "list"

    if action == "list":
        query = getattr(args, "search", "") or ""
        matches = set(favorites.filter(query))
        entries = [(i, fav) for i, fav in enumerate(favorites.items) if fav in matches]
        if not entries:
            log("info", "no favorites match" if query else "no favorites saved yet")
            return
        render_favorites(entries)

    elif action == "add":
        if not favorites.add(args.hex, args.name or ""):
            log("warning", f"{args.hex} is already a favorite")
            return
        _exit_if_unsaved(favorites)
        log("success", f"added {args.hex} to favorites")

    elif action == "remove":
        try:
            removed = favorites.remove(args.index)
        except IndexError:
            _exit_no_index(args.index, favorites)
        _exit_if_unsaved(favorites)
        log("success", f"removed {removed.color} from favorites")

    elif action == "rename":
        try:
            renamed = favorites.rename(args.index, args.name)
        except IndexError:
            _exit_no_index(args.index, favorites)
        _exit_if_unsaved(favorites)
        log("success", f"renamed {renamed.color} to '{renamed.name}'")

    elif action == "clear":
        favorites.clear()
        _exit_if_unsaved(favorites)
        log("success", "cleared all favorites")
