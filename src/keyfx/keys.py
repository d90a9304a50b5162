"""Key universe, colors, events and frames shared by every effect."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Union


class StandardKey(enum.Enum):
    """Regular keys of the German (QWERTZ) layout."""

    ESC = enum.auto()
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    PRINT = enum.auto()
    SCROLL_LOCK = enum.auto()
    PAUSE = enum.auto()

    CIRCUMFLEX = enum.auto()
    DIGIT_1 = enum.auto()
    DIGIT_2 = enum.auto()
    DIGIT_3 = enum.auto()
    DIGIT_4 = enum.auto()
    DIGIT_5 = enum.auto()
    DIGIT_6 = enum.auto()
    DIGIT_7 = enum.auto()
    DIGIT_8 = enum.auto()
    DIGIT_9 = enum.auto()
    DIGIT_0 = enum.auto()
    SZ = enum.auto()
    TICK = enum.auto()
    BACKSPACE = enum.auto()

    TAB = enum.auto()
    Q = enum.auto()
    W = enum.auto()
    E = enum.auto()
    R = enum.auto()
    T = enum.auto()
    Z = enum.auto()
    U = enum.auto()
    I = enum.auto()  # noqa: E741
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    UUML = enum.auto()
    PLUS = enum.auto()
    RETURN = enum.auto()

    CAPS_LOCK = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    OUML = enum.auto()
    AUML = enum.auto()
    SHARP = enum.auto()

    LEFT_SHIFT = enum.auto()
    SMALLER_THAN = enum.auto()
    Y = enum.auto()
    X = enum.auto()
    C = enum.auto()
    V = enum.auto()
    B = enum.auto()
    N = enum.auto()
    M = enum.auto()
    COMMA = enum.auto()
    DOT = enum.auto()
    MINUS = enum.auto()
    RIGHT_SHIFT = enum.auto()

    LEFT_CONTROL = enum.auto()
    LEFT_WINDOWS = enum.auto()
    LEFT_ALT = enum.auto()
    SPACE = enum.auto()
    RIGHT_ALT = enum.auto()
    RIGHT_WINDOWS = enum.auto()
    MENU = enum.auto()
    RIGHT_CONTROL = enum.auto()

    INSERT = enum.auto()
    HOME = enum.auto()
    PAGE_UP = enum.auto()
    DELETE = enum.auto()
    END = enum.auto()
    PAGE_DOWN = enum.auto()
    UP = enum.auto()
    LEFT = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()

    NUM_LOCK = enum.auto()
    NUM_SLASH = enum.auto()
    NUM_STAR = enum.auto()
    NUM_MINUS = enum.auto()
    NUM_7 = enum.auto()
    NUM_8 = enum.auto()
    NUM_9 = enum.auto()
    NUM_PLUS = enum.auto()
    NUM_4 = enum.auto()
    NUM_5 = enum.auto()
    NUM_6 = enum.auto()
    NUM_1 = enum.auto()
    NUM_2 = enum.auto()
    NUM_3 = enum.auto()
    NUM_RETURN = enum.auto()
    NUM_0 = enum.auto()
    NUM_COMMA = enum.auto()


class MediaKey(enum.Enum):
    """Media controls; the hardware cannot light these."""

    BACKWARD = enum.auto()
    PLAY_PAUSE = enum.auto()
    FORWARD = enum.auto()
    STOP = enum.auto()
    MUTE = enum.auto()
    VOLUME_DOWN = enum.auto()
    VOLUME_UP = enum.auto()


class GamingKey(enum.Enum):
    G1 = enum.auto()
    G2 = enum.auto()
    G3 = enum.auto()
    G4 = enum.auto()
    G5 = enum.auto()
    G6 = enum.auto()
    G7 = enum.auto()
    G8 = enum.auto()
    G9 = enum.auto()


class LogoKey(enum.Enum):
    """Illuminated logo zones; they light up but cannot be pressed."""

    G_LOGO = enum.auto()
    G_BADGE = enum.auto()


Key = Union[StandardKey, MediaKey, GamingKey, LogoKey]

ALL_KEYS: tuple[Key, ...] = (*StandardKey, *GamingKey, *LogoKey, *MediaKey)


def is_displayable(key: Key) -> bool:
    """Return True when the key's color can be set."""
    return not isinstance(key, MediaKey)


class Color(NamedTuple):
    red: int
    green: int
    blue: int


class KeyColor(NamedTuple):
    key: Key
    color: Color


@dataclass(frozen=True, slots=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True, slots=True)
class KeyReleased:
    key: Key


KeyEvent = Union[KeyPressed, KeyReleased]


@dataclass(slots=True)
class Frame:
    """Color commands produced by one effect callback.

    ``fill`` is applied to every key first, then ``keys`` in order, so a
    later entry for the same key wins. A frame with neither is a no-op.
    """

    fill: Color | None = None
    keys: list[KeyColor] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.fill is not None or bool(self.keys)

    def colors(self) -> dict[Key, Color]:
        """Collapse ``keys`` into the final color per key."""
        return {key: color for key, color in self.keys}


class KeyIndex:
    """Dense bijection between a fixed set of keys and ``range(len(keys))``."""

    def __init__(self, keys: Iterable[Key]) -> None:
        self.keys: tuple[Key, ...] = tuple(keys)
        self._slots: dict[Key, int] = {key: i for i, key in enumerate(self.keys)}
        assert len(self._slots) == len(self.keys), "duplicate key in index"

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def slot(self, key: Key) -> int:
        return self._slots[key]
