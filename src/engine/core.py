# [file name]: src/engine/core.py
# src/engine/core.py

import logging
import random
import threading

from src.config import default_config
from .game_state import GameState
from .apple_manager import AppleManager
from .game_over_checker import GameOverChecker
from .renderer import Renderer

logger = logging.getLogger(__name__)


class GameEngine:
    """Main game engine coordinating all subsystems for one session."""

    def __init__(self, config=None, rng=None):
        self.config = config or default_config()
        self.rng = rng or random.Random()

        # Guards the pending direction against input from other threads
        self._input_lock = threading.Lock()

        # Initialize subsystems
        self.game_state = GameState(self.config)
        self.apple_manager = AppleManager(self.game_state, self.config, self.rng)
        self.game_over_checker = GameOverChecker(self.game_state)
        self.renderer = Renderer(self.game_state.size, self.config['block_size'])

    # Observable fields
    @property
    def is_alive(self):
        return self.game_state.is_alive

    @property
    def apples_eaten(self):
        return self.game_state.apples_eaten

    @property
    def remaining_time(self):
        return self.game_state.remaining_time

    def update(self):
        """Advance the session by one tick."""
        state = self.game_state

        if state.is_game_over():
            return

        with self._input_lock:
            state.apply_pending_direction()

        # Move, then spawn, then eat
        state.advance_snake()
        self.apple_manager.spawn_if_needed()
        self.apple_manager.consume_at(state.head)

        state.spend_time(self.config['update_interval'])
        state.increment_ticks()

        self.game_over_checker.check_game_over()

    def change_direction_clockwise(self):
        """Queue a clockwise turn from the active direction for the next tick."""
        with self._input_lock:
            self.game_state.pending_direction = self.game_state.direction.next_clockwise()

    def change_direction_counter_clockwise(self):
        """Queue a counter-clockwise turn from the active direction for the next tick."""
        with self._input_lock:
            self.game_state.pending_direction = self.game_state.direction.next_counter_clockwise()

    def render(self):
        """Return (left, right) images of the current state."""
        return self.renderer.render(self.game_state)

    def is_valid_snake(self, snake_parts):
        return self.game_over_checker.is_valid_snake(snake_parts)

    def new_apple_point(self, max_attempts=None):
        return self.apple_manager.new_apple_point(max_attempts)

    def get_view_data(self):
        """Return game state formatted for UI."""
        state = self.game_state.get_state()
        state['remaining_seconds'] = int(state['remaining_time'])
        return state
