"""
Departure/arrival waypoint derivation.

Places a perpendicular, centered stub ("dongle") off each endpoint so the
routed connector leaves and enters its shapes at a right angle.
"""

from dataclasses import dataclass
from typing import Optional

from .grid import CELL_SIZE, Heading, Point


@dataclass(frozen=True)
class Waypoints:
    """Departure and arrival stubs plus the heading the route leaves with."""
    departure: Point
    arrival: Point
    heading: Heading


def departure_heading(dx: float, dy: float) -> Heading:
    """
    Pick the departure heading from the dominant axis of travel.

    Ties (|dx| == |dy|) go to the horizontal axis.
    """
    if abs(dx) >= abs(dy):
        return Heading.RIGHT if dx > 0 else Heading.LEFT
    return Heading.DOWN if dy > 0 else Heading.UP


def derive_waypoints(start: Point, end: Point, cell_size: float = CELL_SIZE) -> Optional[Waypoints]:
    """
    Compute departure and arrival waypoints between two points.

    Args:
        start: Connector start point
        end: Connector end point
        cell_size: Grid cell size; offsets smaller than one cell count as aligned

    Returns:
        Waypoints, or None when the points are already effectively aligned
        and a direct segment needs no intermediate points
    """
    dx = end.x - start.x
    dy = end.y - start.y

    if abs(dx) < cell_size:
        return None  # Vertical line
    if abs(dy) < cell_size:
        return None  # Horizontal line

    heading = departure_heading(dx, dy)

    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2

    if heading.is_horizontal:
        # Both stubs sit on a shared vertical line at the horizontal midpoint
        departure = Point(mid_x, start.y)
        arrival = Point(mid_x, end.y)
    else:
        departure = Point(start.x, mid_y)
        arrival = Point(end.x, mid_y)

    return Waypoints(departure=departure, arrival=arrival, heading=heading)
