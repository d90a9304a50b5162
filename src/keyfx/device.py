"""In-memory keyboard that frames are painted onto."""

from __future__ import annotations

from .config import PALETTE
from .keys import ALL_KEYS, Color, Frame, Key, is_displayable


class VirtualKeyboard:
    """Holds the current color of every displayable key."""

    def __init__(self) -> None:
        self.colors: dict[Key, Color] = {
            key: PALETTE["background"] for key in ALL_KEYS if is_displayable(key)
        }
        self.frames_applied = 0

    def apply(self, frame: Frame) -> None:
        if not frame:
            return
        if frame.fill is not None:
            for key in self.colors:
                self.colors[key] = frame.fill
        for key, color in frame.keys:
            assert key in self.colors, f"{key} cannot be lit"
            self.colors[key] = color
        self.frames_applied += 1

    def color_of(self, key: Key) -> Color | None:
        return self.colors.get(key)

    def snapshot(self) -> dict[Key, Color]:
        return dict(self.colors)
