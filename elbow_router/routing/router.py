"""
Elbow connector routing entry points.

Pipeline: derive departure/arrival waypoints -> quantize to the grid ->
short-circuit aligned waypoints -> A* search -> corner extraction.
Every call is a pure function of its inputs; no state is shared between calls.
"""

import logging
import math
from numbers import Real
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .grid import CELL_SIZE, GridCell, Heading, Point, manhattan_distance, to_grid
from .waypoints import derive_waypoints
from .astar import astar_route
from .path_optimizer import extract_corners
from ..core.exceptions import (
    ConfigurationError,
    InvalidHeadingError,
    InvalidPointError,
    RouteDistanceExceededError
)

logger = logging.getLogger(__name__)


def as_point(value: Any, name: str = 'point') -> Point:
    """
    Validate and convert an (x, y) pair to a Point.

    Raises:
        InvalidPointError: If the value is not a pair of finite numbers
    """
    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise InvalidPointError(f"{name} must be an (x, y) pair, got: {value!r}") from e

    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, Real):
            raise InvalidPointError(f"{name} coordinates must be numbers, got: {value!r}")
        if not math.isfinite(coord):
            raise InvalidPointError(f"{name} coordinates must be finite, got: {value!r}")

    return Point(float(x), float(y))


def validate_cell_size(cell_size: Any) -> float:
    """Ensure the grid cell size is a positive finite number."""
    if isinstance(cell_size, bool) or not isinstance(cell_size, Real):
        raise ConfigurationError(f"cell_size must be a number, got: {cell_size!r}")
    if not math.isfinite(cell_size) or cell_size <= 0:
        raise ConfigurationError(f"cell_size must be positive and finite, got: {cell_size!r}")
    return float(cell_size)


def validate_heading(heading: Any, dx: int, dy: int) -> Heading:
    """
    Ensure a departure heading does not point away from the arrival.

    A heading opposite to the grid offset (dx, dy) on its own axis would need
    two turns to reach the arrival.

    Raises:
        InvalidHeadingError: If the heading is not a Heading or points away
    """
    if not isinstance(heading, Heading):
        raise InvalidHeadingError(f"heading must be a Heading, got: {heading!r}")
    hx, hy = heading.delta
    if hx * dx < 0 or hy * dy < 0:
        raise InvalidHeadingError(
            f"heading {heading.name} points away from the arrival (grid offset {dx}, {dy})"
        )
    return heading


def route_between_waypoints(
    departure: Tuple[float, float],
    arrival: Tuple[float, float],
    heading: Heading,
    cell_size: float = CELL_SIZE,
    max_grid_distance: Optional[int] = None,
    max_expansions: Optional[int] = None
) -> List[Point]:
    """
    Route between explicit departure and arrival waypoints.

    Args:
        departure: Point the route leaves from
        arrival: Point the route arrives at
        heading: Heading the route is already travelling in at departure
        cell_size: Grid cell size
        max_grid_distance: Optional cap on the quantized Manhattan distance to search
        max_expansions: Optional cap on states expanded by the search

    Returns:
        [departure, corner_1, ..., corner_k, arrival]
        A single [departure] when both waypoints are the same point.

    Raises:
        InvalidPointError: If either waypoint is invalid
        InvalidHeadingError: If the heading points away from the arrival
        RouteDistanceExceededError: If the search distance exceeds max_grid_distance
        SearchLimitExceededError: If the search exceeds max_expansions
    """
    departure = as_point(departure, 'departure')
    arrival = as_point(arrival, 'arrival')
    cell_size = validate_cell_size(cell_size)

    sx = to_grid(departure.x, cell_size)
    sy = to_grid(departure.y, cell_size)
    ex = to_grid(arrival.x, cell_size)
    ey = to_grid(arrival.y, cell_size)

    if departure == arrival:
        return [departure]

    # Waypoints share a row or column: a single straight segment
    if sx == ex or sy == ey:
        return [departure, arrival]

    heading = validate_heading(heading, ex - sx, ey - sy)

    distance = manhattan_distance(sx, sy, ex, ey)
    if max_grid_distance is not None and distance > max_grid_distance:
        raise RouteDistanceExceededError(
            f"Route spans {distance} grid cells, exceeding the limit of {max_grid_distance}"
        )

    path = astar_route(GridCell(sx, sy, heading), ex, ey, max_expansions=max_expansions)

    result = [departure]
    result.extend(extract_corners(path, departure, arrival, cell_size))
    result.append(arrival)
    return result


def compute_elbow_path(
    start: Tuple[float, float],
    end: Tuple[float, float],
    cell_size: float = CELL_SIZE,
    max_grid_distance: Optional[int] = None,
    max_expansions: Optional[int] = None
) -> List[Point]:
    """
    Compute the intermediate points of an elbow connector.

    Args:
        start: Connector start point
        end: Connector end point
        cell_size: Grid cell size
        max_grid_distance: Optional cap on the quantized Manhattan distance to search
        max_expansions: Optional cap on states expanded by the search

    Returns:
        Intermediate points (start and end excluded). An empty list means the
        connector is a direct straight segment.

    Examples:
        >>> compute_elbow_path((0, 0), (100, 0))
        []
        >>> compute_elbow_path((0, 0), (200, 40))
        [Point(x=100.0, y=0.0), Point(x=100.0, y=40.0)]
    """
    start = as_point(start, 'start')
    end = as_point(end, 'end')
    cell_size = validate_cell_size(cell_size)

    waypoints = derive_waypoints(start, end, cell_size)
    if waypoints is None:
        return []

    return route_between_waypoints(
        waypoints.departure,
        waypoints.arrival,
        waypoints.heading,
        cell_size=cell_size,
        max_grid_distance=max_grid_distance,
        max_expansions=max_expansions
    )


def full_path(
    start: Tuple[float, float],
    end: Tuple[float, float],
    **kwargs
) -> List[Point]:
    """Return the complete polyline: start, intermediate points, end."""
    start = as_point(start, 'start')
    end = as_point(end, 'end')
    return [start, *compute_elbow_path(start, end, **kwargs), end]


class ElbowRouter:
    """
    Elbow connector router with fixed grid and search limits.

    Holds no state between calls, so one instance can serve any number of
    connectors concurrently.
    """

    def __init__(
        self,
        cell_size: float = CELL_SIZE,
        max_grid_distance: Optional[int] = None,
        max_expansions: Optional[int] = None
    ):
        """
        Initialize router.

        Args:
            cell_size: Grid cell size in canvas units (default: 20)
            max_grid_distance: Optional cap on searched grid distance
            max_expansions: Optional cap on expanded search states
        """
        self.cell_size = validate_cell_size(cell_size)
        self.max_grid_distance = max_grid_distance
        self.max_expansions = max_expansions

    def route(self, start: Tuple[float, float], end: Tuple[float, float]) -> List[Point]:
        """Intermediate points for a connector from start to end."""
        return compute_elbow_path(
            start, end,
            cell_size=self.cell_size,
            max_grid_distance=self.max_grid_distance,
            max_expansions=self.max_expansions
        )

    def route_full(self, start: Tuple[float, float], end: Tuple[float, float]) -> List[Point]:
        """Complete polyline for a connector, endpoints included."""
        start = as_point(start, 'start')
        end = as_point(end, 'end')
        return [start, *self.route(start, end), end]

    def route_many(
        self,
        pairs: Iterable[Sequence[Tuple[float, float]]]
    ) -> List[List[Point]]:
        """Route several (start, end) pairs in order."""
        routes = [self.route(start, end) for start, end in pairs]
        logger.debug(f"Routed {len(routes)} connectors")
        return routes

    def __repr__(self) -> str:
        return (
            f"ElbowRouter(cell_size={self.cell_size}, "
            f"max_grid_distance={self.max_grid_distance}, "
            f"max_expansions={self.max_expansions})"
        )
