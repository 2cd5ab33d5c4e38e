# [file name]: src/engine/game_over_checker.py
# src/engine/game_over_checker.py

import logging

logger = logging.getLogger(__name__)

OUT_OF_BOUNDS = "out_of_bounds"
SELF_COLLISION = "self_collision"
TIME_UP = "time_up"


class GameOverChecker:
    """Manages game end conditions."""

    def __init__(self, game_state):
        self.game_state = game_state

    def in_bounds(self, point):
        size = self.game_state.size
        return 0 <= point.x < size.width and 0 <= point.y < size.height

    def find_snake_fault(self, snake_parts):
        """Return the reason the snake is invalid, or None."""
        parts = list(snake_parts)
        for idx, part in enumerate(parts):
            if not self.in_bounds(part):
                return OUT_OF_BOUNDS
            for other in parts[idx + 1:]:
                if part == other:
                    return SELF_COLLISION
        return None

    def is_valid_snake(self, snake_parts):
        """False if any part is off the grid or two parts share a cell."""
        return self.find_snake_fault(snake_parts) is None

    def check_game_over(self):
        """Check if the session should end and mark it dead if so."""
        state = self.game_state

        if state.is_game_over():
            return True

        cause = self.find_snake_fault(state.snake)
        if cause is None and not state.remaining_time > 0:
            cause = TIME_UP

        if cause:
            state.set_game_over(cause)
            logger.info(f"Game over after {state.ticks} ticks: {cause} "
                        f"(apples eaten: {state.apples_eaten})")
            return True

        return False
