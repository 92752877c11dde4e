"""
Grid-based A* routing for orthogonal ("elbow") connectors.

Routes right-angle connectors between two points on an open canvas with the
fewest turns and perpendicular entry/exit at both ends.
"""

from .grid import CELL_SIZE, GridCell, Heading, Point, to_grid, from_grid
from .waypoints import Waypoints, derive_waypoints
from .astar import astar_route
from .path_optimizer import extract_corners, count_turns, is_orthogonal, to_svg_path
from .router import ElbowRouter, compute_elbow_path, full_path, route_between_waypoints

__all__ = [
    'CELL_SIZE',
    'GridCell',
    'Heading',
    'Point',
    'to_grid',
    'from_grid',
    'Waypoints',
    'derive_waypoints',
    'astar_route',
    'extract_corners',
    'count_turns',
    'is_orthogonal',
    'to_svg_path',
    'ElbowRouter',
    'compute_elbow_path',
    'full_path',
    'route_between_waypoints',
]
