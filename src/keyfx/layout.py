"""Physical layout tables: the snake grid and the preview geometry."""

from __future__ import annotations

from .config import GRID_HEIGHT, GRID_WIDTH
from .keys import GamingKey, Key, LogoKey, MediaKey, StandardKey as K

# Snake field, indexed FIELD[row][column].
FIELD: tuple[tuple[K, ...], ...] = (
    (K.CIRCUMFLEX, K.DIGIT_1, K.DIGIT_2, K.DIGIT_3, K.DIGIT_4, K.DIGIT_5, K.DIGIT_6,
     K.DIGIT_7, K.DIGIT_8, K.DIGIT_9, K.DIGIT_0, K.SZ, K.TICK),
    (K.TAB, K.Q, K.W, K.E, K.R, K.T, K.Z, K.U, K.I, K.O, K.P, K.UUML, K.PLUS),
    (K.CAPS_LOCK, K.A, K.S, K.D, K.F, K.G, K.H, K.J, K.K, K.L, K.OUML, K.AUML, K.SHARP),
    (K.LEFT_SHIFT, K.SMALLER_THAN, K.Y, K.X, K.C, K.V, K.B, K.N, K.M, K.COMMA, K.DOT,
     K.MINUS, K.RIGHT_SHIFT),
)

assert len(FIELD) == GRID_HEIGHT
assert all(len(row) == GRID_WIDTH for row in FIELD)


def field_key(pos: tuple[int, int]) -> K:
    """Return the key under grid position ``(column, row)``."""
    x, y = pos
    assert 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT, f"off-grid {pos}"
    return FIELD[y][x]


# Preview geometry in key units: (top, left, width, key).
Placement = tuple[float, float, float, Key]

MAIN_LEFT = 1.5


def _row(top: float, left: float, *cells: tuple[float, Key | None]) -> list[Placement]:
    """Lay out ``cells`` left to right; a None key leaves a gap."""
    placed: list[Placement] = []
    x = left
    for width, key in cells:
        if key is not None:
            placed.append((top, x, width, key))
        x += width
    return placed


def _build_preview() -> tuple[Placement, ...]:
    rows: list[Placement] = []
    rows += _row(0.0, 0.0, (1, LogoKey.G_LOGO), (16.5, None),
                 (1, MediaKey.MUTE), (1, MediaKey.VOLUME_DOWN), (1, MediaKey.VOLUME_UP))
    rows += _row(
        1.25, MAIN_LEFT,
        (1, K.ESC), (1, None),
        (1, K.F1), (1, K.F2), (1, K.F3), (1, K.F4), (0.5, None),
        (1, K.F5), (1, K.F6), (1, K.F7), (1, K.F8), (0.5, None),
        (1, K.F9), (1, K.F10), (1, K.F11), (1, K.F12), (0.25, None),
        (1, K.PRINT), (1, K.SCROLL_LOCK), (1, K.PAUSE), (0.25, None),
        (1, MediaKey.BACKWARD), (1, MediaKey.PLAY_PAUSE), (1, MediaKey.FORWARD),
        (1, MediaKey.STOP),
    )
    rows += _row(
        2.5, MAIN_LEFT,
        *[(1, key) for key in FIELD[0]], (2, K.BACKSPACE), (0.25, None),
        (1, K.INSERT), (1, K.HOME), (1, K.PAGE_UP), (0.25, None),
        (1, K.NUM_LOCK), (1, K.NUM_SLASH), (1, K.NUM_STAR), (1, K.NUM_MINUS),
    )
    rows += _row(
        3.5, MAIN_LEFT,
        (1.5, K.TAB), *[(1, key) for key in FIELD[1][1:]], (1.5, K.RETURN), (0.25, None),
        (1, K.DELETE), (1, K.END), (1, K.PAGE_DOWN), (0.25, None),
        (1, K.NUM_7), (1, K.NUM_8), (1, K.NUM_9), (1, K.NUM_PLUS),
    )
    rows += _row(
        4.5, MAIN_LEFT,
        (1.75, K.CAPS_LOCK), *[(1, key) for key in FIELD[2][1:]], (1.25, None),
        (3.5, None), (1, K.NUM_4), (1, K.NUM_5), (1, K.NUM_6),
    )
    rows += _row(
        5.5, MAIN_LEFT,
        (1.25, K.LEFT_SHIFT), *[(1, key) for key in FIELD[3][1:-1]], (2.75, K.RIGHT_SHIFT),
        (1.25, None), (1, K.UP), (1.25, None),
        (1, K.NUM_1), (1, K.NUM_2), (1, K.NUM_3), (1, K.NUM_RETURN),
    )
    rows += _row(
        6.5, MAIN_LEFT,
        (1.25, K.LEFT_CONTROL), (1.25, K.LEFT_WINDOWS), (1.25, K.LEFT_ALT),
        (6.25, K.SPACE), (1.25, K.RIGHT_ALT), (1.25, K.RIGHT_WINDOWS), (1.25, K.MENU),
        (1.25, K.RIGHT_CONTROL), (0.25, None),
        (1, K.LEFT), (1, K.DOWN), (1, K.RIGHT), (0.25, None),
        (2, K.NUM_0), (1, K.NUM_COMMA),
    )
    rows += _row(7.75, MAIN_LEFT + 7.0, (1, LogoKey.G_BADGE))
    rows += [(1.25 + i * 0.75, 0.0, 1.0, key) for i, key in enumerate(GamingKey)]
    return tuple(rows)


PREVIEW_KEYS: tuple[Placement, ...] = _build_preview()
