"""
Export route results to Polars DataFrames
"""

import logging
from typing import List

import polars as pl

from .types import RouteResultDict
from .utils import validate_route_results

logger = logging.getLogger(__name__)

VERTEX_SCHEMA = {
    'connector_id': pl.Utf8,
    'vertex_index': pl.Int64,
    'kind': pl.Utf8,
    'x': pl.Float64,
    'y': pl.Float64,
}

SUMMARY_SCHEMA = {
    'connector_id': pl.Utf8,
    'start_x': pl.Float64,
    'start_y': pl.Float64,
    'end_x': pl.Float64,
    'end_y': pl.Float64,
    'point_count': pl.Int64,
    'turns': pl.Int64,
    'is_straight': pl.Boolean,
    'error': pl.Utf8,
}


def _vertex_kinds(point_count: int) -> List[str]:
    """
    Label the vertices of a full connector polyline by position

    A lone intermediate point has no separate departure and arrival, so it is
    labelled a corner. Always returns point_count + 2 labels.
    """
    if point_count == 0:
        return ['start', 'end']
    if point_count == 1:
        return ['start', 'corner', 'end']
    corners = ['corner'] * (point_count - 2)
    return ['start', 'departure', *corners, 'arrival', 'end']


def export_to_dataframe(results: List[RouteResultDict]) -> pl.DataFrame:
    """
    Export route results to a Polars DataFrame with one row per vertex

    Failed connectors (with an ``error``) contribute no rows. If there is
    nothing to export, returns an empty DataFrame with the correct schema.

    Args:
        results: List of route result dictionaries

    Returns:
        Polars DataFrame with columns:
        - connector_id: Connector identifier
        - vertex_index: Position of the vertex along the connector (0 = start)
        - kind: start, departure, corner, arrival or end
        - x, y: Vertex coordinates

    Raises:
        InvalidResultsError: If results have invalid structure

    Examples:
        >>> df = export_to_dataframe([{
        ...     'connector_id': 'a', 'start': [0, 0], 'end': [200, 40],
        ...     'points': [[100, 0], [100, 40]], 'turns': 2
        ... }])
        >>> df['kind'].to_list()
        ['start', 'departure', 'arrival', 'end']
    """
    validated_results = validate_route_results(results)

    rows = {name: [] for name in VERTEX_SCHEMA}

    for result in validated_results:
        if result.get('error'):
            continue

        vertices = [result['start'], *result['points'], result['end']]
        kinds = _vertex_kinds(len(result['points']))

        for index, (vertex, kind) in enumerate(zip(vertices, kinds)):
            rows['connector_id'].append(str(result['connector_id']))
            rows['vertex_index'].append(index)
            rows['kind'].append(kind)
            rows['x'].append(float(vertex[0]))
            rows['y'].append(float(vertex[1]))

    df = pl.DataFrame(rows, schema=VERTEX_SCHEMA)
    logger.debug(f"Built vertex DataFrame with {df.height} rows")
    return df


def export_summary_to_dataframe(results: List[RouteResultDict]) -> pl.DataFrame:
    """
    Export route results to a Polars DataFrame with one row per connector

    Args:
        results: List of route result dictionaries

    Returns:
        Polars DataFrame with endpoint coordinates, intermediate point count,
        turn count, a straight-segment flag and any routing error
    """
    validated_results = validate_route_results(results)

    rows = {name: [] for name in SUMMARY_SCHEMA}

    for result in validated_results:
        error = result.get('error')
        rows['connector_id'].append(str(result['connector_id']))

        for prefix, key in (('start', 'start'), ('end', 'end')):
            pair = result[key]
            if error or not isinstance(pair, (list, tuple)) or len(pair) != 2:
                rows[f'{prefix}_x'].append(None)
                rows[f'{prefix}_y'].append(None)
            else:
                rows[f'{prefix}_x'].append(float(pair[0]))
                rows[f'{prefix}_y'].append(float(pair[1]))

        if error:
            rows['point_count'].append(None)
            rows['turns'].append(None)
            rows['is_straight'].append(None)
        else:
            rows['point_count'].append(len(result['points']))
            rows['turns'].append(int(result['turns']))
            rows['is_straight'].append(len(result['points']) == 0)
        rows['error'].append(error or None)

    return pl.DataFrame(rows, schema=SUMMARY_SCHEMA)
