"""Centralized configuration and palette definitions for keyfx."""

from __future__ import annotations

import os

from .keys import Color


def _env_seconds(name: str, default_ms: int) -> float:
    """Read a millisecond override from the environment as seconds."""

    raw = os.getenv(name)
    if not raw:
        return default_ms / 1000.0
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive number of milliseconds, got {raw!r}")
    return value / 1000.0


LOG_LEVEL: str = os.getenv("KEYFX_LOG_LEVEL", "INFO").upper()

GRID_WIDTH: int = 13
GRID_HEIGHT: int = 4

SNAKE_TICK: float = _env_seconds("KEYFX_SNAKE_TICK_MS", 350)
HEATMAP_BLINK_INTERVAL: float = _env_seconds("KEYFX_BLINK_MS", 500)

SNAKE_START: tuple[tuple[int, int], ...] = ((3, 2), (2, 2), (1, 2))
SNAKE_BODY_BASE: int = 100  # blue floor for the tail
SNAKE_BODY_RANGE: float = 155.0
PENDING_LIMIT: int = 2

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}

BLACK = Color(0, 0, 0)
BLUE = Color(0, 0, 255)
RED = Color(255, 0, 0)

PALETTE = {
    "background": BLACK,
    "head": Color(0xE9, 0x1E, 0x63),
    "food": Color(0, 255, 0),
    "dead": RED,
    "restart": BLUE,
    "crash": Color(255, 165, 0),
    "flash_idle": BLUE,
    "flash_pressed": RED,
    "logo_on": BLUE,
    "logo_off": BLACK,
}

# black -> blue -> cyan -> green -> yellow -> red
GRADIENT: tuple[Color, ...] = (
    Color(0, 0, 0),
    Color(0, 0, 255),
    Color(0, 255, 255),
    Color(0, 255, 0),
    Color(255, 255, 0),
    Color(255, 0, 0),
)
