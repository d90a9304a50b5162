"""Common interface every lighting effect implements."""

from __future__ import annotations

from .keys import Frame, KeyEvent


class Effect:
    """One selectable lighting behavior driven by key events and ticks.

    The host calls ``activate`` once, then ``apply`` only for events that
    ``accept`` returned True for, and ``tick`` every ``tick_period`` seconds
    when that is not None. Calls never overlap.
    """

    name: str = "effect"
    tick_period: float | None = None

    def activate(self) -> Frame:
        return Frame()

    def accept(self, event: KeyEvent) -> bool:
        return False

    def apply(self, event: KeyEvent) -> Frame:
        return Frame()

    def tick(self, elapsed: float) -> Frame:
        return Frame()
