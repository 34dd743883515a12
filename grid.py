"""
Геометрия поля: клетки и направления.

Поле квадратное, GRID_SIZE x GRID_SIZE.
  x растёт вправо, y растёт вниз, (0, 0) - левый верхний угол.
"""
from collections import namedtuple
from enum import Enum

import config
from config import GRID_SIZE


class Point(namedtuple('Point', ['x', 'y'])):
    """Клетка поля. Равна обычному кортежу (x, y)"""

    __slots__ = ()

    def moved(self, direction):
        """Соседняя клетка в направлении direction"""
        dx, dy = direction.value
        return Point(self.x + dx, self.y + dy)


class Direction(Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_opposite(self, other):
        return other is self.opposite

    @classmethod
    def from_name(cls, name):
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown direction: {name!r}") from None


def in_bounds(point, grid_size=GRID_SIZE):
    """Клетка внутри поля?"""
    x, y = point
    return 0 <= x < grid_size and 0 <= y < grid_size


def to_points(cells):
    """Последовательность пар (x, y) -> список Point"""
    return [Point(x, y) for x, y in cells]
