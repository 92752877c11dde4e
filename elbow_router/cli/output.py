"""
Output formatting and printing utilities for CLI
"""

from typing import List, Sequence, Tuple

from ..routing.path_optimizer import format_coord


def format_points(points: Sequence[Tuple[float, float]]) -> str:
    """
    Format a point list for terminal output

    Examples:
        >>> format_points([(100.0, 0.0), (100.0, 40.0)])
        '(100, 0) -> (100, 40)'
    """
    return ' -> '.join(f"({format_coord(x)}, {format_coord(y)})" for x, y in points)


def print_batch_summary(results: List[dict], exported: List[str]) -> None:
    """
    Print a summary of a batch routing run

    Args:
        results: Route results
        exported: Paths of files written
    """
    failed = [r for r in results if r.get('error')]
    routed = len(results) - len(failed)
    straight = sum(1 for r in results if not r.get('error') and not r['points'])

    print_separator()
    print(f"🔀 Routed {routed}/{len(results)} connectors ({straight} straight, {len(failed)} failed)")
    for result in failed:
        print(f"   ✗ {result['connector_id']}: {result['error']}")
    for path in exported:
        print(f"📄 Saved: {path}")
    print_separator()


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)
