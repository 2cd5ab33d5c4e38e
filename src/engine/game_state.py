# [file name]: src/engine/game_state.py
# src/engine/game_state.py

from collections import deque

from .grid import Direction, Point, Size


class GameState:
    """Holds one game session and its state transitions."""

    def __init__(self, config):
        self.config = config
        self.size = Size(config['grid_width'], config['grid_height'])
        self.reset()

    def reset(self):
        """Reset to initial state."""
        self.snake = deque(Point(x, y) for x, y in self.config['initial_snake'])
        self.direction = Direction.from_name(self.config['initial_direction'])
        self.pending_direction = None
        self.apples = []
        self.eaten_apple_points = []
        self.is_alive = True
        self.remaining_time = float(self.config['initial_time'])
        self.apples_eaten = 0
        self.ticks = 0
        self.death_cause = None

    @property
    def head(self):
        return self.snake[0]

    def apply_pending_direction(self):
        """Make the buffered direction active. Returns True if one was buffered."""
        if self.pending_direction is None:
            return False
        self.direction = self.pending_direction
        self.pending_direction = None
        return True

    def advance_snake(self):
        """
        Push a new head and pop the tail. If the popped tail sits on an
        eaten apple, that point is put back as the new tail.
        """
        self.snake.appendleft(self.direction.step(self.head))
        tail = self.snake.pop()

        if tail in self.eaten_apple_points:
            self.eaten_apple_points.remove(tail)
            self.snake.append(tail)
            return True
        return False

    def count_apple(self):
        self.apples_eaten += 1

    def extend_time(self, seconds):
        self.remaining_time += seconds

    def spend_time(self, seconds):
        self.remaining_time -= seconds

    def increment_ticks(self):
        self.ticks += 1

    def set_game_over(self, cause=None):
        """Mark the session as dead."""
        self.is_alive = False
        self.death_cause = cause

    def is_game_over(self):
        return not self.is_alive

    def get_state(self):
        """Return a plain snapshot of the session."""
        return {
            "snake": [list(p) for p in self.snake],
            "direction": self.direction.name.lower(),
            "pending_direction": self.pending_direction.name.lower() if self.pending_direction else None,
            "apples": [list(p) for p in self.apples],
            "eaten_apple_points": [list(p) for p in self.eaten_apple_points],
            "is_alive": self.is_alive,
            "remaining_time": self.remaining_time,
            "apples_eaten": self.apples_eaten,
            "ticks": self.ticks,
            "death_cause": self.death_cause,
        }
