"""Per-key keyboard lighting effects: heatmap, snake and flash."""

from .effect import Effect
from .flash import FlashEffect
from .gradient import interpolate
from .heatmap import HeatmapEffect
from .host import EFFECTS, EffectHost, create_effect
from .keys import Color, Frame, KeyColor, KeyPressed, KeyReleased
from .snake import GameState, SnakeGame

__all__ = [
    "Color",
    "EFFECTS",
    "Effect",
    "EffectHost",
    "FlashEffect",
    "Frame",
    "GameState",
    "HeatmapEffect",
    "KeyColor",
    "KeyPressed",
    "KeyReleased",
    "SnakeGame",
    "create_effect",
    "interpolate",
]
