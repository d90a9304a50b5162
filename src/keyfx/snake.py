"""Snake played on the letter block, one grid cell per tick."""

from __future__ import annotations

import enum
import logging
import random
from collections import deque

from .config import (
    DIRECTIONS,
    GRID_HEIGHT,
    GRID_WIDTH,
    PALETTE,
    PENDING_LIMIT,
    SNAKE_BODY_BASE,
    SNAKE_BODY_RANGE,
    SNAKE_START,
    SNAKE_TICK,
)
from .effect import Effect
from .keys import Color, Frame, KeyColor, KeyEvent, KeyPressed, StandardKey
from .layout import field_key

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

KEY_TO_DIRECTION: dict[StandardKey, str] = {
    StandardKey.UP: "UP",
    StandardKey.DOWN: "DOWN",
    StandardKey.LEFT: "LEFT",
    StandardKey.RIGHT: "RIGHT",
}
RESTART_KEY = StandardKey.NUM_RETURN


class GameState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class SnakeGame(Effect):
    """Encapsulates game state and the per-tick step.

    ``body[0]`` is the head. The grid wraps on both axes, so the only way to
    lose is running into yourself.
    """

    name = "snake"

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.tick_period = SNAKE_TICK
        self.reset()

    def reset(self) -> None:
        """Put the snake back at its starting spot and drop a fresh food cell."""
        self.body: deque[Cell] = deque(SNAKE_START)
        self.food: Cell = SNAKE_START[0]
        self.state = GameState.RUNNING
        self.pending: deque[str] = deque(maxlen=PENDING_LIMIT)
        self.last_direction = "RIGHT"
        self.spawn_food()

    def spawn_food(self) -> None:
        """Pick a uniformly random cell that is not part of the body."""
        # Unbounded: the board is far larger than any reachable snake.
        while True:
            pos = (self.rng.randrange(GRID_WIDTH), self.rng.randrange(GRID_HEIGHT))
            if pos not in self.body:
                self.food = pos
                return

    # --- Effect contract -----------------------------------------------

    def activate(self) -> Frame:
        self.reset()
        logger.debug("snake started, food at %s", self.food)
        return Frame(fill=PALETTE["background"], keys=self._snake_colors())

    def accept(self, event: KeyEvent) -> bool:
        if not isinstance(event, KeyPressed):
            return False
        if self.state is GameState.RUNNING:
            return event.key in KEY_TO_DIRECTION
        return event.key == RESTART_KEY

    def apply(self, event: KeyEvent) -> Frame:
        if self.state is GameState.RUNNING:
            # maxlen drops the oldest queued turn
            self.pending.append(KEY_TO_DIRECTION[event.key])
            return Frame()
        logger.debug("restarting snake")
        return self.activate()

    def tick(self, elapsed: float) -> Frame:
        if self.state is GameState.STOPPED:
            return Frame()
        return self.step()

    # --- Logic step ----------------------------------------------------

    def next_head(self) -> Cell:
        dx, dy = DIRECTIONS[self.last_direction]
        x, y = self.body[0]
        return (x + dx) % GRID_WIDTH, (y + dy) % GRID_HEIGHT

    def step(self) -> Frame:
        """Advance the game by exactly one grid cell."""
        if self.pending:
            self.last_direction = self.pending.popleft()
        new_head = self.next_head()

        eat = new_head == self.food
        # the tail moves out before the head moves in
        vacated = None if eat else self.body.pop()

        if new_head in self.body:
            if vacated is not None:
                self.body.append(vacated)
            return self.game_over(new_head)

        self.body.appendleft(new_head)
        if eat:
            self.spawn_food()

        frame = Frame(keys=self._snake_colors())
        if vacated is not None and vacated not in self.body:
            frame.keys.append(KeyColor(field_key(vacated), PALETTE["background"]))
        return frame

    def game_over(self, crash: Cell) -> Frame:
        """Freeze play and paint the board red with the crash and restart keys marked."""
        self.state = GameState.STOPPED
        logger.debug("snake crashed at %s with length %d", crash, len(self.body))
        keys = self._snake_colors()
        keys.append(KeyColor(RESTART_KEY, PALETTE["restart"]))
        keys.append(KeyColor(field_key(crash), PALETTE["crash"]))
        return Frame(fill=PALETTE["dead"], keys=keys)

    def _snake_colors(self) -> list[KeyColor]:
        """Body shaded by blue toward the head, then the head and the food."""
        length = len(self.body)
        delta = SNAKE_BODY_RANGE / length
        colors = []
        for idx, pos in enumerate(list(self.body)[1:]):
            blue = SNAKE_BODY_BASE + int(delta * (length - idx))
            colors.append(KeyColor(field_key(pos), Color(0, 0, blue)))
        colors.append(KeyColor(field_key(self.body[0]), PALETTE["head"]))
        colors.append(KeyColor(field_key(self.food), PALETTE["food"]))
        return colors
