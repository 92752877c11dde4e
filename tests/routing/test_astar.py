"""
Tests for the heading-aware A* search
"""

import pytest
from elbow_router.core.exceptions import RoutingInvariantError, SearchLimitExceededError
from elbow_router.routing import astar
from elbow_router.routing.astar import astar_route, estimate, neighbors, turn_cost
from elbow_router.routing.grid import GridCell, Heading


def positions(path):
    return [(cell.x, cell.y) for cell in path]


def turns_in(path):
    headings = [cell.heading for cell in path[1:]]
    return sum(1 for h1, h2 in zip(headings, headings[1:]) if h1 != h2)


class TestNeighbors:
    """Test suite for successor generation"""

    def test_no_u_turn(self):
        """Test the reverse of the current heading is never generated"""
        successors = neighbors(GridCell(0, 0, Heading.RIGHT), turn_penalty=8)
        headings = [cell.heading for cell, _ in successors]

        assert Heading.LEFT not in headings
        assert headings == [Heading.UP, Heading.DOWN, Heading.RIGHT]

    def test_turn_costs(self):
        """Test straight moves cost 1 and turns cost 1 + penalty cubed"""
        costs = {cell.heading: cost for cell, cost in neighbors(GridCell(0, 0, Heading.RIGHT), 8)}

        assert costs[Heading.RIGHT] == 1
        assert costs[Heading.UP] == 513
        assert costs[Heading.DOWN] == 513
        assert turn_cost(8) == 513

    def test_no_heading_moves_freely(self):
        """Test the start state may move in all four directions at unit cost"""
        successors = neighbors(GridCell(0, 0, Heading.NONE), turn_penalty=8)

        assert len(successors) == 4
        assert all(cost == 1 for _, cost in successors)
        assert {cell for cell, _ in successors} == {
            GridCell(0, -1, Heading.UP),
            GridCell(0, 1, Heading.DOWN),
            GridCell(-1, 0, Heading.LEFT),
            GridCell(1, 0, Heading.RIGHT),
        }


class TestEstimate:
    """Test suite for the heuristic"""

    def test_unaligned_adds_squared_penalty(self):
        assert estimate(GridCell(0, 0, Heading.RIGHT), 5, 3, turn_penalty=8) == 8 + 64

    def test_aligned_is_plain_distance(self):
        assert estimate(GridCell(5, 0, Heading.RIGHT), 5, 3, turn_penalty=8) == 3
        assert estimate(GridCell(0, 3, Heading.DOWN), 5, 3, turn_penalty=8) == 5

    def test_goal_is_zero(self):
        assert estimate(GridCell(5, 3, Heading.DOWN), 5, 3, turn_penalty=8) == 0


class TestAstarRoute:
    """Test suite for astar_route"""

    def test_single_turn_continues_departure_heading(self):
        """Test the path runs straight along the departure heading, then turns once"""
        path = astar_route(GridCell(0, 0, Heading.RIGHT), 5, 3)

        assert positions(path) == [
            (0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0),
            (5, 1), (5, 2), (5, 3),
        ]
        assert path[0] == GridCell(0, 0, Heading.RIGHT)
        assert path[-1].heading == Heading.DOWN
        assert turns_in(path) == 1

    def test_vertical_departure(self):
        path = astar_route(GridCell(0, 0, Heading.DOWN), 5, 3)

        assert positions(path)[:4] == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert positions(path)[-1] == (5, 3)
        assert turns_in(path) == 1

    def test_negative_direction(self):
        path = astar_route(GridCell(0, 0, Heading.LEFT), -4, -2)

        assert positions(path)[4] == (-4, 0)
        assert positions(path)[-1] == (-4, -2)
        assert path[-1].heading == Heading.UP

    def test_no_initial_heading(self):
        """Test a start without heading still routes with a single turn"""
        path = astar_route(GridCell(0, 0, Heading.NONE), 3, 2)

        assert len(path) == 6
        assert positions(path)[-1] == (3, 2)
        assert turns_in(path) == 1

    def test_path_steps_are_unit_moves(self):
        path = astar_route(GridCell(2, -1, Heading.UP), -3, -6)

        for a, b in zip(path, path[1:]):
            assert abs(a.x - b.x) + abs(a.y - b.y) == 1
            assert b.heading != a.heading.reverse() or a.heading == Heading.NONE

    def test_goal_heading_is_unconstrained(self):
        """Test the search stops on position alone"""
        path = astar_route(GridCell(0, 0, Heading.RIGHT), 5, 0)

        assert positions(path)[-1] == (5, 0)
        assert len(path) == 6

    def test_deterministic(self):
        first = astar_route(GridCell(0, 0, Heading.NONE), 4, 4)
        second = astar_route(GridCell(0, 0, Heading.NONE), 4, 4)

        assert first == second

    def test_expansion_limit(self):
        with pytest.raises(SearchLimitExceededError):
            astar_route(GridCell(0, 0, Heading.RIGHT), 5, 3, max_expansions=3)

    def test_exhausted_open_set_is_invariant_fault(self, monkeypatch):
        """Test a search that runs out of states raises instead of returning nothing"""
        monkeypatch.setattr(astar, 'neighbors', lambda cell, turn_penalty: [])

        with pytest.raises(RoutingInvariantError):
            astar_route(GridCell(0, 0, Heading.RIGHT), 5, 3)
