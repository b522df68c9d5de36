"""Clamped slide navigation state."""

from __future__ import annotations


class NavigationState:
    """Current slide index within ``[0, total)``; clamps, never wraps.

    Not thread-safe: callers serialize access (see ``ViewerController``).
    """

    __slots__ = ("_current", "_total")

    def __init__(self, total: int) -> None:
        if total < 1:
            raise ValueError(f"NavigationState needs at least one slide, got {total}")
        self._current = 0
        self._total = total

    @property
    def total(self) -> int:
        return self._total

    def index(self) -> int:
        return self._current

    def advance(self) -> None:
        if self._current < self._total - 1:
            self._current += 1

    def retreat(self) -> None:
        if self._current > 0:
            self._current -= 1

    def __repr__(self) -> str:
        return f"NavigationState(current={self._current}, total={self._total})"
