"""Whole-board flash on every key press."""

from __future__ import annotations

from .config import PALETTE
from .effect import Effect
from .keys import Frame, KeyEvent, KeyPressed


class FlashEffect(Effect):
    name = "flash"

    def activate(self) -> Frame:
        return Frame(fill=PALETTE["flash_idle"])

    def accept(self, event: KeyEvent) -> bool:
        return True

    def apply(self, event: KeyEvent) -> Frame:
        if isinstance(event, KeyPressed):
            return Frame(fill=PALETTE["flash_pressed"])
        return Frame(fill=PALETTE["flash_idle"])
