"""Tests for the effect host, the virtual keyboard and the flash effect."""

import pytest

from keyfx.config import PALETTE
from keyfx.device import VirtualKeyboard
from keyfx.flash import FlashEffect
from keyfx.heatmap import HeatmapEffect
from keyfx.host import EFFECTS, EffectHost, create_effect
from keyfx.keys import (
    Color,
    Frame,
    KeyColor,
    KeyPressed,
    KeyReleased,
    MediaKey,
    StandardKey,
)
from keyfx.snake import SnakeGame


class TestVirtualKeyboard:
    def test_starts_dark(self):
        keyboard = VirtualKeyboard()
        assert set(keyboard.snapshot().values()) == {PALETTE["background"]}

    def test_media_keys_have_no_color(self):
        assert VirtualKeyboard().color_of(MediaKey.MUTE) is None

    def test_fill_then_keys(self):
        keyboard = VirtualKeyboard()
        red = Color(255, 0, 0)
        green = Color(0, 255, 0)
        keyboard.apply(Frame(fill=red, keys=[KeyColor(StandardKey.A, green)]))
        assert keyboard.color_of(StandardKey.A) == green
        assert keyboard.color_of(StandardKey.B) == red

    def test_later_update_wins(self):
        keyboard = VirtualKeyboard()
        keyboard.apply(
            Frame(
                keys=[
                    KeyColor(StandardKey.A, Color(1, 2, 3)),
                    KeyColor(StandardKey.A, Color(4, 5, 6)),
                ]
            )
        )
        assert keyboard.color_of(StandardKey.A) == Color(4, 5, 6)

    def test_empty_frame_is_noop(self):
        keyboard = VirtualKeyboard()
        keyboard.apply(Frame())
        assert keyboard.frames_applied == 0


class TestFlash:
    def test_cycle(self):
        host = EffectHost()
        host.activate(FlashEffect())
        assert host.keyboard.color_of(StandardKey.A) == PALETTE["flash_idle"]
        host.dispatch(KeyPressed(StandardKey.A))
        assert host.keyboard.color_of(StandardKey.Q) == PALETTE["flash_pressed"]
        host.dispatch(KeyReleased(StandardKey.A))
        assert host.keyboard.color_of(StandardKey.Q) == PALETTE["flash_idle"]

    def test_accepts_everything(self):
        effect = FlashEffect()
        assert effect.accept(KeyPressed(MediaKey.MUTE))
        assert effect.accept(KeyReleased(StandardKey.SPACE))


class TestEffectHost:
    def test_rejected_event_never_applied(self):
        host = EffectHost()
        effect = HeatmapEffect()
        host.activate(effect)
        assert not host.dispatch(KeyPressed(MediaKey.VOLUME_UP))
        assert not host.dispatch(KeyReleased(StandardKey.A))
        assert sum(effect.counts) == 0

    def test_accepted_event_paints(self):
        host = EffectHost()
        host.activate(HeatmapEffect())
        assert host.dispatch(KeyPressed(StandardKey.H))
        assert host.keyboard.color_of(StandardKey.H) == Color(255, 0, 0)

    def test_no_effect_ignores_everything(self):
        host = EffectHost()
        assert not host.dispatch(KeyPressed(StandardKey.A))
        assert host.advance(10.0) == 0

    def test_effect_without_period_never_ticks(self):
        host = EffectHost()
        host.activate(FlashEffect())
        assert host.advance(5.0) == 0

    def test_one_tick_per_whole_period(self):
        host = EffectHost()
        game = SnakeGame()
        host.activate(game)
        assert host.advance(game.tick_period * 0.5) == 0
        assert host.advance(game.tick_period * 0.6) == 1
        assert host.advance(game.tick_period * 2.5) == 2

    def test_snake_moves_on_ticks(self):
        host = EffectHost()
        game = SnakeGame()
        host.activate(game)
        head = game.body[0]
        host.advance(game.tick_period)
        assert game.body[0] == ((head[0] + 1) % 13, head[1])

    def test_non_positive_period_is_rejected(self):
        host = EffectHost()
        game = SnakeGame()
        host.activate(game)
        game.tick_period = 0.0
        with pytest.raises(AssertionError):
            host.advance(0.016)

    def test_switching_resets_accumulator(self):
        host = EffectHost()
        game = SnakeGame()
        host.activate(game)
        host.advance(game.tick_period * 0.9)
        host.activate(SnakeGame())
        assert host.advance(host.effect.tick_period * 0.5) == 0


class TestRegistry:
    @pytest.mark.parametrize("name", sorted(EFFECTS))
    def test_create_registered(self, name):
        effect = create_effect(name)
        assert effect.name == name

    def test_heatmap_options(self):
        effect = create_effect("heatmap", blink_logo=True)
        assert effect.blink_logo

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            create_effect("rainbow")
