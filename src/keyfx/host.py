"""Drive one active effect and forward its frames to the keyboard."""

from __future__ import annotations

import logging
from typing import Callable

from .device import VirtualKeyboard
from .effect import Effect
from .flash import FlashEffect
from .heatmap import HeatmapEffect
from .keys import KeyEvent
from .snake import SnakeGame

logger = logging.getLogger(__name__)

EFFECTS: dict[str, Callable[..., Effect]] = {
    "heatmap": HeatmapEffect,
    "snake": SnakeGame,
    "flash": FlashEffect,
}


def create_effect(name: str, **options) -> Effect:
    """Build a registered effect; unknown names raise KeyError."""
    return EFFECTS[name](**options)


class EffectHost:
    """Sequential dispatcher: events and ticks reach the effect one at a time."""

    def __init__(self, keyboard: VirtualKeyboard | None = None) -> None:
        self.keyboard = keyboard or VirtualKeyboard()
        self.effect: Effect | None = None
        self._tick_accumulator = 0.0

    def activate(self, effect: Effect) -> None:
        """Switch to ``effect``; the previous one just stops receiving calls."""
        if self.effect is not None:
            logger.info("switching effect %s -> %s", self.effect.name, effect.name)
        else:
            logger.info("activating effect %s", effect.name)
        self.effect = effect
        self._tick_accumulator = 0.0
        self.keyboard.apply(effect.activate())

    def dispatch(self, event: KeyEvent) -> bool:
        """Hand ``event`` to the effect if it accepts it; return whether it did."""
        if self.effect is None or not self.effect.accept(event):
            return False
        self.keyboard.apply(self.effect.apply(event))
        return True

    def advance(self, dt: float) -> int:
        """Account for ``dt`` seconds and run one tick per whole period elapsed."""
        if self.effect is None or self.effect.tick_period is None:
            return 0
        period = self.effect.tick_period
        assert period > 0, f"{self.effect.name} has a non-positive tick period"
        self._tick_accumulator += dt
        ticks = 0
        while self._tick_accumulator >= period:
            self._tick_accumulator -= period
            self.keyboard.apply(self.effect.tick(period))
            ticks += 1
        return ticks
