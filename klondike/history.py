"""Snapshot-based undo log."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .state import GameState, PileSnapshot

DEFAULT_CAPACITY = 300


class History:
    """Bounded log of pile snapshots, oldest entries dropped first.

    The newest entry always mirrors the live piles, so undoing means discarding
    it and restoring the entry beneath.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("History capacity must allow at least two entries.")
        self._entries: Deque[PileSnapshot] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._entries)

    def reset(self, state: GameState) -> None:
        self._entries.clear()
        self.record(state)

    def record(self, state: GameState) -> PileSnapshot:
        snapshot = state.snapshot()
        self._entries.append(snapshot)
        return snapshot

    def can_undo(self) -> bool:
        return len(self._entries) >= 2

    def undo(self) -> Optional[PileSnapshot]:
        """Drop the newest entry and return the one it replaced, or None if nothing remains."""
        if not self.can_undo():
            return None
        self._entries.pop()
        return self._entries[-1]
