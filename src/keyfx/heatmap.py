"""Key press frequency heatmap."""

from __future__ import annotations

import logging

from .config import HEATMAP_BLINK_INTERVAL, PALETTE
from .effect import Effect
from .gradient import interpolate
from .keys import (
    ALL_KEYS,
    Frame,
    Key,
    KeyColor,
    KeyEvent,
    KeyIndex,
    KeyPressed,
    LogoKey,
    is_displayable,
)

logger = logging.getLogger(__name__)


class HeatmapEffect(Effect):
    """Color every key by how often it was pressed relative to the busiest key.

    With ``blink_logo`` the logo zones are left out of the heatmap and
    toggle between blue and black on every tick instead.
    """

    name = "heatmap"

    def __init__(self, blink_logo: bool = False) -> None:
        self.blink_logo = blink_logo
        self.tick_period = HEATMAP_BLINK_INTERVAL if blink_logo else None
        tracked = [key for key in ALL_KEYS if is_displayable(key)]
        if blink_logo:
            tracked = [key for key in tracked if not isinstance(key, LogoKey)]
        self.index = KeyIndex(tracked)
        self.counts: list[int] = [0] * len(self.index)
        self.blink = False

    def activate(self) -> Frame:
        """Reset all counters and blank the board."""
        self.counts = [0] * len(self.index)
        self.blink = False
        logger.debug("heatmap tracking %d keys", len(self.index))
        return Frame(fill=PALETTE["background"])

    def accept(self, event: KeyEvent) -> bool:
        return isinstance(event, KeyPressed) and event.key in self.index

    def apply(self, event: KeyEvent) -> Frame:
        assert isinstance(event, KeyPressed), "heatmap only handles presses"
        self.counts[self.index.slot(event.key)] += 1
        return self.render()

    def count(self, key: Key) -> int:
        return self.counts[self.index.slot(key)]

    def render(self) -> Frame:
        """Full repaint of every tracked key, normalized to the current maximum."""
        assert self.counts, "heatmap has no tracked keys"
        peak = max(self.counts)
        updates = []
        for key, hits in zip(self.index.keys, self.counts):
            scaled = hits / peak if peak else 0.0
            updates.append(KeyColor(key, interpolate(scaled)))
        return Frame(keys=updates)

    def tick(self, elapsed: float) -> Frame:
        if not self.blink_logo:
            return Frame()
        self.blink = not self.blink
        color = PALETTE["logo_on"] if self.blink else PALETTE["logo_off"]
        return Frame(keys=[KeyColor(key, color) for key in LogoKey])
