"""
Tests for departure/arrival waypoint derivation
"""

import pytest
from elbow_router.routing.grid import Heading, Point
from elbow_router.routing.waypoints import departure_heading, derive_waypoints


class TestDepartureHeading:
    """Test suite for dominant-axis heading selection"""

    @pytest.mark.parametrize('dx,dy,expected', [
        (100, 40, Heading.RIGHT),
        (-100, 40, Heading.LEFT),
        (40, 100, Heading.DOWN),
        (40, -100, Heading.UP),
        (-5, 10, Heading.DOWN),
    ])
    def test_dominant_axis(self, dx, dy, expected):
        assert departure_heading(dx, dy) == expected

    def test_tie_prefers_horizontal(self):
        """Test |dx| == |dy| departs horizontally"""
        assert departure_heading(100, 100) == Heading.RIGHT
        assert departure_heading(-100, 100) == Heading.LEFT
        assert departure_heading(-100, -100) == Heading.LEFT


class TestDeriveWaypoints:
    """Test suite for derive_waypoints"""

    @pytest.mark.parametrize('start,end', [
        ((0, 0), (100, 0)),
        ((0, 0), (0, 100)),
        ((0, 0), (19.9, 100)),
        ((0, 0), (100, 19.9)),
        ((5, 5), (5, 5)),
    ])
    def test_aligned_points_need_no_waypoints(self, start, end):
        """Test offsets under one cell on either axis count as aligned"""
        assert derive_waypoints(Point(*start), Point(*end)) is None

    def test_horizontal_departure_uses_midpoint_column(self):
        waypoints = derive_waypoints(Point(0, 0), Point(100, 100))

        assert waypoints.heading == Heading.RIGHT
        assert waypoints.departure == (50, 0)
        assert waypoints.arrival == (50, 100)

    def test_leftward_departure(self):
        waypoints = derive_waypoints(Point(0, 0), Point(-100, 100))

        assert waypoints.heading == Heading.LEFT
        assert waypoints.departure == (-50, 0)
        assert waypoints.arrival == (-50, 100)

    def test_vertical_departure_uses_midpoint_row(self):
        waypoints = derive_waypoints(Point(0, 0), Point(40, 200))

        assert waypoints.heading == Heading.DOWN
        assert waypoints.departure == (0, 100)
        assert waypoints.arrival == (40, 100)

    def test_upward_departure(self):
        waypoints = derive_waypoints(Point(0, 0), Point(40, -200))

        assert waypoints.heading == Heading.UP
        assert waypoints.departure == (0, -100)
        assert waypoints.arrival == (40, -100)

    def test_exactly_one_cell_offset_is_routed(self):
        """Test an offset of exactly one cell is not treated as aligned"""
        waypoints = derive_waypoints(Point(0, 0), Point(20, 20))

        assert waypoints is not None
        assert waypoints.heading == Heading.RIGHT
        assert waypoints.departure == (10, 0)
        assert waypoints.arrival == (10, 20)

    def test_cell_size_sets_alignment_threshold(self):
        assert derive_waypoints(Point(0, 0), Point(100, 40), cell_size=50) is None
        assert derive_waypoints(Point(0, 0), Point(100, 40), cell_size=20) is not None
