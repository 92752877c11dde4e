"""
Path post-processing for elbow connector routing.

Turns raw search output into clean canvas geometry:
- Reduce the cell path to the corners where the heading changes
- Snap corners onto the true (non-quantized) waypoint coordinates
- Inspect and render finished polylines
"""

import math
from typing import List, Sequence, Tuple

from .grid import CELL_SIZE, GridCell, Heading, Point, from_grid


def extract_corners(
    path: Sequence[GridCell],
    departure: Point,
    arrival: Point,
    cell_size: float = CELL_SIZE
) -> List[Point]:
    """
    Reduce a cell path to its direction-change corners.

    Each cell records the heading it was entered with, so a corner sits on the
    interior cell whose outgoing heading differs from its incoming one. The
    very first move is never a turn (incoming heading NONE).

    Args:
        path: Search path including start and goal cells
        departure: True departure point the path starts from
        arrival: True arrival point the path ends at
        cell_size: Grid cell size used to quantize the path

    Returns:
        Ordered corner points (empty for a single straight run)
    """
    if len(path) <= 2:
        return []

    first = path[0]
    last = path[-1]
    corners = []

    for i in range(1, len(path) - 1):
        incoming = path[i].heading
        outgoing = path[i + 1].heading

        if incoming == outgoing or incoming == Heading.NONE:
            continue

        x = from_grid(path[i].x, cell_size)
        y = from_grid(path[i].y, cell_size)

        # Snap to waypoint coordinates to remove quantization error
        if path[i].x == first.x:
            x = departure.x
        if path[i].y == first.y:
            y = departure.y
        if path[i].x == last.x:
            x = arrival.x
        if path[i].y == last.y:
            y = arrival.y

        corners.append(Point(x, y))

    return corners


def _direction(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[int, int]:
    """Sign vector of the segment a -> b."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return ((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))


def is_orthogonal(points: Sequence[Tuple[float, float]]) -> bool:
    """Check every consecutive pair differs in exactly one coordinate."""
    for a, b in zip(points, points[1:]):
        same_x = a[0] == b[0]
        same_y = a[1] == b[1]
        if same_x == same_y:
            return False
    return True


def count_turns(points: Sequence[Tuple[float, float]]) -> int:
    """Count direction changes along a polyline."""
    directions = [_direction(a, b) for a, b in zip(points, points[1:])]
    return sum(1 for d1, d2 in zip(directions, directions[1:]) if d1 != d2)


def has_reversal(points: Sequence[Tuple[float, float]]) -> bool:
    """Check whether any segment doubles straight back over the previous one."""
    directions = [_direction(a, b) for a, b in zip(points, points[1:])]
    for d1, d2 in zip(directions, directions[1:]):
        if d1 == (-d2[0], -d2[1]) and d1 != (0, 0):
            return True
    return False


def format_coord(value: float) -> str:
    """Format a coordinate compactly for SVG output."""
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def to_svg_path(points: Sequence[Tuple[float, float]], corner_radius: float = 0.0) -> str:
    """
    Generate an SVG path ``d`` attribute for a polyline.

    Args:
        points: List of (x, y) vertices
        corner_radius: Radius for rounding corners (0 keeps sharp corners)

    Returns:
        SVG path data, or an empty string for fewer than two points
    """
    if len(points) < 2:
        return ""

    path = f"M {format_coord(points[0][0])},{format_coord(points[0][1])}"

    for i in range(1, len(points)):
        curr = points[i]

        if i < len(points) - 1 and corner_radius > 0:
            prev = points[i - 1]
            next_pt = points[i + 1]

            dx_in = curr[0] - prev[0]
            dy_in = curr[1] - prev[1]
            dx_out = next_pt[0] - curr[0]
            dy_out = next_pt[1] - curr[1]

            len_in = math.hypot(dx_in, dy_in)
            len_out = math.hypot(dx_out, dy_out)

            # Only round if both segments are long enough
            if len_in > corner_radius * 2 and len_out > corner_radius * 2:
                corner_start_x = curr[0] - (dx_in / len_in) * corner_radius
                corner_start_y = curr[1] - (dy_in / len_in) * corner_radius
                corner_end_x = curr[0] + (dx_out / len_out) * corner_radius
                corner_end_y = curr[1] + (dy_out / len_out) * corner_radius

                path += f" L {format_coord(corner_start_x)},{format_coord(corner_start_y)}"
                path += f" Q {format_coord(curr[0])},{format_coord(curr[1])} {format_coord(corner_end_x)},{format_coord(corner_end_y)}"
                continue

        path += f" L {format_coord(curr[0])},{format_coord(curr[1])}"

    return path
