#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/logic/workspace/state.py

import threading
from typing import Callable, List

from shadelab.core import config as c
from .edits import ChannelEdit, CommitHexInput, Edit, HexInput, PickColor, SelectShade
from .engine import WorkspaceState, initial_state, reduce

Listener = Callable[[WorkspaceState], None]


class ColorWorkspace:
    """
    Observable holder of the current selection.

    `apply` is the only way the state changes. Each edit runs the whole
    cascade under a lock and swaps in the finished snapshot, so readers
    never see a half-updated selection.

    Listeners are called outside the state lock, one delivery at a time,
    always with the newest snapshot. A snapshot already superseded by the
    time its turn comes is skipped, so no listener ever receives an older
    state after a newer one.
    """

    def __init__(self, color: str = c.DEFAULT_COLOR):
        self._lock = threading.Lock()
        self._state = initial_state(color)
        self._listeners: List[Listener] = []
        self._notify_lock = threading.RLock()
        self._delivered = self._state

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def apply(self, edit: Edit) -> WorkspaceState:
        with self._lock:
            previous = self._state
            self._state = reduce(previous, edit)
            current = self._state

        if current != previous:
            self._notify()
        return current

    def _notify(self) -> None:
        with self._notify_lock:
            with self._lock:
                latest = self._state
                listeners = list(self._listeners)
            if latest is self._delivered:
                return
            self._delivered = latest
            for listener in listeners:
                listener(latest)

    # Convenience wrappers, one per UI gesture

    def pick(self, color: str) -> WorkspaceState:
        return self.apply(PickColor(color))

    def type_hex(self, text: str) -> WorkspaceState:
        return self.apply(HexInput(text))

    def commit_hex(self) -> WorkspaceState:
        return self.apply(CommitHexInput())

    def set_channel(self, space: str, channel: str, raw) -> WorkspaceState:
        return self.apply(ChannelEdit(space, channel, raw))

    def select_shade(self, index: int) -> WorkspaceState:
        return self.apply(SelectShade(index))
