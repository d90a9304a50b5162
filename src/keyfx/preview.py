"""On-screen keyboard preview: a pygame window standing in for the device."""

from __future__ import annotations

import logging

import pygame

from .device import VirtualKeyboard
from .effect import Effect
from .host import EffectHost
from .keys import (
    GamingKey,
    Key,
    KeyEvent,
    KeyPressed,
    KeyReleased,
    LogoKey,
    MediaKey,
    StandardKey as K,
)
from .layout import PREVIEW_KEYS

logger = logging.getLogger(__name__)

UNIT: int = 40  # pixels per key unit
MARGIN: int = 20
FPS: int = 60
FONT_NAME: str = "consolas"
FONT_SIZE: int = 12

PREVIEW_PALETTE = {
    "case": pygame.Color(18, 18, 22),
    "key_rim": pygame.Color(45, 45, 55),
    "unlit": pygame.Color(70, 70, 80),
    "label_dark": pygame.Color(10, 10, 10),
    "label_light": pygame.Color(216, 239, 255),
}

# Physical positions: pygame reports US key codes, the board is German.
KEY_MAP: dict[int, Key] = {
    pygame.K_ESCAPE: K.ESC,
    pygame.K_F1: K.F1, pygame.K_F2: K.F2, pygame.K_F3: K.F3, pygame.K_F4: K.F4,
    pygame.K_F5: K.F5, pygame.K_F6: K.F6, pygame.K_F7: K.F7, pygame.K_F8: K.F8,
    pygame.K_F9: K.F9, pygame.K_F10: K.F10, pygame.K_F11: K.F11, pygame.K_F12: K.F12,
    pygame.K_PRINT: K.PRINT, pygame.K_PAUSE: K.PAUSE,
    pygame.K_BACKQUOTE: K.CIRCUMFLEX,
    pygame.K_1: K.DIGIT_1, pygame.K_2: K.DIGIT_2, pygame.K_3: K.DIGIT_3,
    pygame.K_4: K.DIGIT_4, pygame.K_5: K.DIGIT_5, pygame.K_6: K.DIGIT_6,
    pygame.K_7: K.DIGIT_7, pygame.K_8: K.DIGIT_8, pygame.K_9: K.DIGIT_9,
    pygame.K_0: K.DIGIT_0,
    pygame.K_MINUS: K.SZ, pygame.K_EQUALS: K.TICK, pygame.K_BACKSPACE: K.BACKSPACE,
    pygame.K_TAB: K.TAB,
    pygame.K_q: K.Q, pygame.K_w: K.W, pygame.K_e: K.E, pygame.K_r: K.R, pygame.K_t: K.T,
    pygame.K_y: K.Z, pygame.K_u: K.U, pygame.K_i: K.I, pygame.K_o: K.O, pygame.K_p: K.P,
    pygame.K_LEFTBRACKET: K.UUML, pygame.K_RIGHTBRACKET: K.PLUS, pygame.K_RETURN: K.RETURN,
    pygame.K_CAPSLOCK: K.CAPS_LOCK,
    pygame.K_a: K.A, pygame.K_s: K.S, pygame.K_d: K.D, pygame.K_f: K.F, pygame.K_g: K.G,
    pygame.K_h: K.H, pygame.K_j: K.J, pygame.K_k: K.K, pygame.K_l: K.L,
    pygame.K_SEMICOLON: K.OUML, pygame.K_QUOTE: K.AUML, pygame.K_BACKSLASH: K.SHARP,
    pygame.K_LSHIFT: K.LEFT_SHIFT,
    pygame.K_z: K.Y, pygame.K_x: K.X, pygame.K_c: K.C, pygame.K_v: K.V, pygame.K_b: K.B,
    pygame.K_n: K.N, pygame.K_m: K.M,
    pygame.K_COMMA: K.COMMA, pygame.K_PERIOD: K.DOT, pygame.K_SLASH: K.MINUS,
    pygame.K_RSHIFT: K.RIGHT_SHIFT,
    pygame.K_LCTRL: K.LEFT_CONTROL, pygame.K_LALT: K.LEFT_ALT,
    pygame.K_SPACE: K.SPACE, pygame.K_RALT: K.RIGHT_ALT,
    pygame.K_MENU: K.MENU, pygame.K_RCTRL: K.RIGHT_CONTROL,
    pygame.K_INSERT: K.INSERT, pygame.K_HOME: K.HOME, pygame.K_PAGEUP: K.PAGE_UP,
    pygame.K_DELETE: K.DELETE, pygame.K_END: K.END, pygame.K_PAGEDOWN: K.PAGE_DOWN,
    pygame.K_UP: K.UP, pygame.K_LEFT: K.LEFT, pygame.K_DOWN: K.DOWN, pygame.K_RIGHT: K.RIGHT,
    pygame.K_NUMLOCK: K.NUM_LOCK, pygame.K_KP_DIVIDE: K.NUM_SLASH,
    pygame.K_KP_MULTIPLY: K.NUM_STAR, pygame.K_KP_MINUS: K.NUM_MINUS,
    pygame.K_KP_PLUS: K.NUM_PLUS, pygame.K_KP_ENTER: K.NUM_RETURN,
    pygame.K_KP_PERIOD: K.NUM_COMMA,
    pygame.K_KP0: K.NUM_0, pygame.K_KP1: K.NUM_1, pygame.K_KP2: K.NUM_2,
    pygame.K_KP3: K.NUM_3, pygame.K_KP4: K.NUM_4, pygame.K_KP5: K.NUM_5,
    pygame.K_KP6: K.NUM_6, pygame.K_KP7: K.NUM_7, pygame.K_KP8: K.NUM_8,
    pygame.K_KP9: K.NUM_9,
    pygame.K_SCROLLOCK: K.SCROLL_LOCK,
    pygame.K_LGUI: K.LEFT_WINDOWS, pygame.K_RGUI: K.RIGHT_WINDOWS,
    pygame.K_AUDIOPREV: MediaKey.BACKWARD, pygame.K_AUDIOPLAY: MediaKey.PLAY_PAUSE,
    pygame.K_AUDIONEXT: MediaKey.FORWARD, pygame.K_AUDIOSTOP: MediaKey.STOP,
    pygame.K_AUDIOMUTE: MediaKey.MUTE,
    pygame.K_VOLUMEDOWN: MediaKey.VOLUME_DOWN, pygame.K_VOLUMEUP: MediaKey.VOLUME_UP,
}


def translate_event(event: pygame.event.Event) -> KeyEvent | None:
    """Turn a pygame key event into a KeyEvent, or None when it has no key."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    key = KEY_MAP.get(event.key)
    if key is None:
        return None
    if event.type == pygame.KEYDOWN:
        return KeyPressed(key)
    return KeyReleased(key)


def _label(key: Key) -> str:
    name = key.name
    if name.startswith("DIGIT_"):
        return name[-1]
    if name.startswith("NUM_") and len(name) == 5:
        return name[-1]
    return name.replace("_", " ").title() if len(name) > 2 else name


class KeyboardPreview:
    """Window that shows the virtual keyboard and feeds it real key presses."""

    def __init__(self, effect: Effect) -> None:
        pygame.init()
        width = max(left + w for _, left, w, _ in PREVIEW_KEYS)
        height = max(top for top, _, _, _ in PREVIEW_KEYS) + 1
        self.size = (int(width * UNIT) + MARGIN * 2, int(height * UNIT) + MARGIN * 2)
        self.window = pygame.display.set_mode(self.size, pygame.DOUBLEBUF)
        pygame.display.set_caption(f"keyfx - {effect.name}")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.keyboard = VirtualKeyboard()
        self.host = EffectHost(self.keyboard)
        self.host.activate(effect)

    def _key_rect(self, top: float, left: float, width: float, key: Key) -> pygame.Rect:
        height = 0.65 if isinstance(key, GamingKey) else 0.9
        return pygame.Rect(
            MARGIN + int(left * UNIT) + 2,
            MARGIN + int(top * UNIT) + 2,
            int(width * UNIT) - 4,
            int(height * UNIT) - 4,
        )

    def handle_events(self) -> bool:
        """Forward key events to the host; return False when the window closes."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            key_event = translate_event(event)
            if key_event is None:
                continue
            if not self.host.dispatch(key_event):
                logger.debug("ignored %s", key_event)
        return True

    def draw(self) -> None:
        """Render every key in its current color with a readable label."""
        self.window.fill(PREVIEW_PALETTE["case"])
        for top, left, width, key in PREVIEW_KEYS:
            rect = self._key_rect(top, left, width, key)
            color = self.keyboard.color_of(key)
            fill = PREVIEW_PALETTE["unlit"] if color is None else pygame.Color(*color)
            radius = rect.height // 2 if isinstance(key, LogoKey) else 4
            pygame.draw.rect(self.window, fill, rect, border_radius=radius)
            pygame.draw.rect(
                self.window, PREVIEW_PALETTE["key_rim"], rect, width=1, border_radius=radius
            )
            # dark text on bright keys
            brightness = fill.r * 0.299 + fill.g * 0.587 + fill.b * 0.114
            text_color = (
                PREVIEW_PALETTE["label_dark"]
                if brightness > 140
                else PREVIEW_PALETTE["label_light"]
            )
            text = self.font.render(_label(key), True, text_color)
            self.window.blit(text, text.get_rect(center=rect.center))

    def start(self) -> None:
        """Run the main loop: handle events, tick at the effect's rate, then render."""
        clock = pygame.time.Clock()
        running = True

        while running:
            dt = clock.tick(FPS) / 1000.0
            running = self.handle_events()
            self.host.advance(dt)
            self.draw()
            pygame.display.update()

        pygame.quit()
