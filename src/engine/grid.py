# [file name]: src/engine/grid.py
# src/engine/grid.py

from collections import namedtuple
from enum import Enum

Point = namedtuple('Point', ['x', 'y'])
Size = namedtuple('Size', ['width', 'height'])


class Direction(Enum):
    """Heading of the snake. The grid's y axis points up."""

    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)
    LEFT = (-1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    def next_clockwise(self):
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def next_counter_clockwise(self):
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def step(self, point):
        """Return the cell one unit away from point in this direction."""
        return Point(point.x + self.dx, point.y + self.dy)

    @classmethod
    def from_name(cls, name):
        return cls[name.strip().upper()]


_CLOCKWISE = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]
