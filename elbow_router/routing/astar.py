"""
A* pathfinding for elbow connector routing.

Searches an unbounded 4-connected grid where the state is (x, y, heading).
The cost function considers:
- Path length (one per grid step)
- Direction changes (turn penalty scaled by overall trip length)
- No immediate U-turns (reverse moves are never generated)

The heuristic adds turn_penalty ** 2 when a turn is still unavoidable. That
can underestimate the remaining cost when more than one turn remains, so the
search is not guaranteed optimal in every configuration; the penalty
magnitudes were tuned by inspection and are kept as-is.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grid import GridCell, Heading, manhattan_distance
from ..core.exceptions import RoutingInvariantError, SearchLimitExceededError

logger = logging.getLogger(__name__)

# Candidate moves in generation order
MOVES = (Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT)


@dataclass(order=True)
class Node:
    """Node in A* search."""
    f_cost: int = field(compare=True)  # f = g + h
    tie_break: int = field(compare=True)  # -g: deeper nodes first on equal f
    sequence: int = field(compare=True)  # Insertion order
    g_cost: int = field(compare=False)
    cell: GridCell = field(compare=False)
    parent: Optional['Node'] = field(default=None, compare=False)


def turn_cost(turn_penalty: int) -> int:
    """Cost of a single step that changes heading."""
    return 1 + turn_penalty ** 3


def neighbors(cell: GridCell, turn_penalty: int) -> List[Tuple[GridCell, int]]:
    """
    Generate successor states with their edge costs.

    Args:
        cell: Current search state
        turn_penalty: Trip-length-scaled penalty base

    Returns:
        List of (neighbor, cost) pairs; the reverse of the current heading is pruned
    """
    reverse = cell.heading.reverse()
    successors = []

    for heading in MOVES:
        if heading == reverse:
            continue

        if cell.heading == Heading.NONE or cell.heading == heading:
            cost = 1
        else:
            cost = turn_cost(turn_penalty)

        successors.append((cell.step(heading), cost))

    return successors


def estimate(cell: GridCell, goal_x: int, goal_y: int, turn_penalty: int) -> int:
    """Heuristic: Manhattan distance plus a squared penalty if a turn remains."""
    distance = manhattan_distance(cell.x, cell.y, goal_x, goal_y)
    if cell.x == goal_x or cell.y == goal_y:
        return distance
    return distance + turn_penalty ** 2


def reconstruct_path(node: Node) -> List[GridCell]:
    """Reconstruct path from goal node by following parent pointers."""
    path = []
    current = node

    while current is not None:
        path.append(current.cell)
        current = current.parent

    path.reverse()
    return path


def astar_route(
    start: GridCell,
    goal_x: int,
    goal_y: int,
    max_expansions: Optional[int] = None
) -> List[GridCell]:
    """
    Find the lowest-cost path from start to the goal position.

    The goal test ignores heading. The turn penalty is the Manhattan distance
    between start and goal, so bends stay expensive at any grid scale.

    Args:
        start: Starting state (position plus departure heading)
        goal_x: Goal grid x
        goal_y: Goal grid y
        max_expansions: Optional cap on expanded states

    Returns:
        List of states from start to goal, inclusive

    Raises:
        SearchLimitExceededError: If max_expansions is exceeded
        RoutingInvariantError: If the open set is exhausted (unreachable)
    """
    turn_penalty = manhattan_distance(start.x, start.y, goal_x, goal_y)
    counter = itertools.count()

    h_cost = estimate(start, goal_x, goal_y, turn_penalty)
    open_set = [Node(
        f_cost=h_cost,
        tie_break=0,
        sequence=next(counter),
        g_cost=0,
        cell=start,
        parent=None
    )]

    # Track best g_cost to each state
    best_g_cost = {start: 0}
    expansions = 0

    while open_set:
        current = heapq.heappop(open_set)

        # Stale entry superseded by a cheaper one
        if current.g_cost > best_g_cost.get(current.cell, current.g_cost):
            continue

        if current.cell.x == goal_x and current.cell.y == goal_y:
            path = reconstruct_path(current)
            logger.debug(
                f"A* reached ({goal_x}, {goal_y}) from ({start.x}, {start.y}): "
                f"cost={current.g_cost}, cells={len(path)}, expansions={expansions}, "
                f"turn_penalty={turn_penalty}"
            )
            return path

        expansions += 1
        if max_expansions is not None and expansions > max_expansions:
            raise SearchLimitExceededError(
                f"Search exceeded {max_expansions} expansions routing "
                f"({start.x}, {start.y}) -> ({goal_x}, {goal_y})"
            )

        for neighbor, step_cost in neighbors(current.cell, turn_penalty):
            g_cost = current.g_cost + step_cost

            # Skip if we've found a better path to this state
            if neighbor in best_g_cost and g_cost >= best_g_cost[neighbor]:
                continue

            best_g_cost[neighbor] = g_cost
            h_cost = estimate(neighbor, goal_x, goal_y, turn_penalty)

            heapq.heappush(open_set, Node(
                f_cost=g_cost + h_cost,
                tie_break=-g_cost,
                sequence=next(counter),
                g_cost=g_cost,
                cell=neighbor,
                parent=current
            ))

    raise RoutingInvariantError(
        f"A* exhausted the open set routing ({start.x}, {start.y}) -> ({goal_x}, {goal_y}); "
        "the unbounded grid should always yield a path"
    )
