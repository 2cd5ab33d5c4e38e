# [file name]: src/engine/apple_manager.py
# src/engine/apple_manager.py

import logging

from .grid import Point

logger = logging.getLogger(__name__)


class AppleSpawnError(RuntimeError):
    """Raised when no free cell was found within the allowed attempts."""


class AppleManager:
    """Manages apple spawning, placement and consumption."""

    def __init__(self, game_state, config, rng):
        self.game_state = game_state
        self.config = config
        self.rng = rng

    def should_spawn(self):
        """One-in-N chance per tick, or always when the board has no apple. The roll is drawn every tick."""
        rolled = self.rng.randrange(self.config['apple_spawn_chance']) == 0
        return rolled or not self.game_state.apples

    def is_valid_apple_point(self, point):
        """An apple may not be placed on the snake. Other apples don't matter."""
        return point not in self.game_state.snake

    def new_apple_point(self, max_attempts=None):
        """Pick random cells until one is off the snake."""
        size = self.game_state.size
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            point = Point(self.rng.randrange(size.width), self.rng.randrange(size.height))
            if self.is_valid_apple_point(point):
                return point
        raise AppleSpawnError(f"No free cell found after {max_attempts} attempts")

    def spawn_if_needed(self):
        """Add an apple if the spawn roll succeeds. Returns the new point or None."""
        if not self.should_spawn():
            return None
        point = self.new_apple_point()
        self.game_state.apples.append(point)
        logger.debug(f"Apple spawned at {tuple(point)}")
        return point

    def time_bonus(self):
        """Seconds granted for the latest apple; shrinks every few apples and may go negative."""
        return self.config['time_bonus'] - self.game_state.apples_eaten // self.config['bonus_decay_every']

    def consume_at(self, head):
        """Eat the first apple under head, if any. Returns the eaten point or None."""
        state = self.game_state
        for apple in state.apples:
            if apple == head:
                state.apples.remove(apple)
                state.eaten_apple_points.append(apple)
                state.count_apple()
                state.extend_time(self.time_bonus())
                logger.debug(f"Apple eaten at {tuple(apple)}, score {state.apples_eaten}")
                return apple
        return None
