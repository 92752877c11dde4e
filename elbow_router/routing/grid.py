"""
Grid system for elbow connector routing.

Snaps continuous canvas coordinates onto a fixed-size integer grid so the
search operates on a discrete, hashable state space, and maps grid indices
back to canvas coordinates.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


# Grid cell size in canvas units
CELL_SIZE = 20.0


class Point(NamedTuple):
    """Immutable 2D point in canvas coordinates."""
    x: float
    y: float


class Heading(Enum):
    """Cardinal direction of the most recent grid move."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    NONE = 'none'  # No prior move (start state only)

    def reverse(self) -> 'Heading':
        """Return the opposite heading (NONE reverses to itself)."""
        return _REVERSE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit grid step for this heading (canvas y grows downward)."""
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Heading.LEFT, Heading.RIGHT)


_REVERSE = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
    Heading.NONE: Heading.NONE,
}

_DELTAS = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
    Heading.NONE: (0, 0),
}


@dataclass(frozen=True)
class GridCell:
    """
    Search state: a grid position plus the heading it was entered with.

    The same position reached with a different heading is a distinct state,
    which is what lets turns be charged on the edge that makes them.
    """
    x: int
    y: int
    heading: Heading = Heading.NONE

    def step(self, heading: Heading) -> 'GridCell':
        """Move one cell in the given heading."""
        dx, dy = heading.delta
        return GridCell(self.x + dx, self.y + dy, heading)


def to_grid(value: float, cell_size: float = CELL_SIZE) -> int:
    """
    Convert a canvas coordinate to a grid index.

    Halves round away from zero so a coordinate always lands in the same
    cell regardless of its sign.
    """
    scaled = value / cell_size
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def from_grid(index: int, cell_size: float = CELL_SIZE) -> float:
    """Convert a grid index back to a canvas coordinate."""
    return index * cell_size


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Manhattan distance between two grid positions."""
    return abs(x1 - x2) + abs(y1 - y2)
