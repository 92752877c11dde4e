"""
Type definitions for route results structure
"""

from typing import TypedDict, List, NotRequired


class RouteResultDict(TypedDict):
    """Structure for a single routed connector"""
    connector_id: str
    start: List[float]
    end: List[float]
    points: List[List[float]]  # Intermediate points, endpoints excluded
    turns: int
    error: NotRequired[str]
