"""
Export route results to a standalone SVG drawing
"""

import logging
from typing import List, Optional

from .types import RouteResultDict
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, validate_route_results, escape_html
from ..routing.path_optimizer import to_svg_path, format_coord

logger = logging.getLogger(__name__)

ARROW_MARKER_ID = 'elbow-arrow'


def export_to_svg(
    results: List[RouteResultDict],
    file_path: Optional[str] = None,
    corner_radius: float = 0.0,
    stroke_width: float = 2.0,
    stroke_color: str = '#1e1e1e',
    padding: float = 20.0
) -> str:
    """
    Render routed connectors as arrows in an SVG document

    Args:
        results: List of route result dictionaries (failed connectors are skipped)
        file_path: Optional path to save the SVG file
        corner_radius: Corner rounding radius (0 keeps sharp corners)
        stroke_width: Connector stroke width
        stroke_color: Connector stroke color
        padding: Space around the bounding box of all connectors

    Returns:
        SVG document as a string

    Raises:
        InvalidResultsError: If results have invalid structure
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If file write operation fails
    """
    validated_results = validate_route_results(results)
    routed = [r for r in validated_results if not r.get('error')]

    polylines = [[r['start'], *r['points'], r['end']] for r in routed]
    all_points = [p for line in polylines for p in line]

    if all_points:
        min_x = min(p[0] for p in all_points) - padding
        min_y = min(p[1] for p in all_points) - padding
        width = max(p[0] for p in all_points) + padding - min_x
        height = max(p[1] for p in all_points) + padding - min_y
    else:
        min_x, min_y, width, height = 0.0, 0.0, 2 * padding, 2 * padding

    color = escape_html(stroke_color)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{format_coord(min_x)} {format_coord(min_y)} {format_coord(width)} {format_coord(height)}" '
        f'width="{format_coord(width)}" height="{format_coord(height)}">',
        '  <defs>',
        f'    <marker id="{ARROW_MARKER_ID}" viewBox="0 0 10 10" refX="10" refY="5" '
        f'markerWidth="6" markerHeight="6" orient="auto-start-reverse">',
        f'      <path d="M 0,0 L 10,5 L 0,10 z" fill="{color}"/>',
        '    </marker>',
        '  </defs>',
    ]

    for result, polyline in zip(routed, polylines):
        path_d = to_svg_path(polyline, corner_radius)
        connector_id = escape_html(result['connector_id'])
        lines.append(
            f'  <path data-connector="{connector_id}" d="{path_d}" fill="none" '
            f'stroke="{color}" stroke-width="{format_coord(stroke_width)}" '
            f'stroke-linejoin="round" marker-end="url(#{ARROW_MARKER_ID})"/>'
        )

    lines.append('</svg>')
    svg = '\n'.join(lines) + '\n'

    if file_path:
        try:
            validated_path = validate_file_path(file_path, must_exist=True)
            validated_path.write_text(svg, encoding='utf-8')
            logger.info(f"SVG drawing exported to: {validated_path}")

        except PathValidationError:
            raise
        except OSError as e:
            logger.error(f"Failed to write SVG file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return svg
