"""
Elbow Router - orthogonal connector routing for diagrams
Right-angle arrows between canvas points with the fewest, cleanest turns
"""

from importlib.metadata import version, PackageNotFoundError

from .routing import ElbowRouter, Heading, Point, compute_elbow_path, full_path, route_between_waypoints
from .core.config import RouterConfig

try:
    __version__ = version("elbow-router")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "ElbowRouter",
    "Heading",
    "Point",
    "RouterConfig",
    "compute_elbow_path",
    "full_path",
    "route_between_waypoints",
]
