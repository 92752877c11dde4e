"""
Batch routing of connectors loaded from tabular files
"""

import logging
import math
from pathlib import Path
from typing import List, Optional, Union

import polars as pl

from .exceptions import BatchInputError, ElbowRouterError, RoutingInvariantError
from ..exporters.types import RouteResultDict
from ..routing.path_optimizer import count_turns
from ..routing.router import ElbowRouter, as_point

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['start_x', 'start_y', 'end_x', 'end_y']

_READERS = {
    '.csv': pl.read_csv,
    '.parquet': pl.read_parquet,
    '.json': pl.read_json,
}


def load_connectors(path: Union[str, Path]) -> pl.DataFrame:
    """
    Load connector endpoints from a CSV, Parquet or JSON file

    Args:
        path: File with start_x, start_y, end_x, end_y columns and an
            optional connector_id column

    Returns:
        DataFrame with a string connector_id column (row index when absent)
        and float coordinate columns

    Raises:
        BatchInputError: If the file type is unsupported, unreadable or
            lacks required columns
    """
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise BatchInputError(
            f"Unsupported connector file type '{path.suffix}'. Use one of: {', '.join(sorted(_READERS))}"
        )
    if not path.exists():
        raise BatchInputError(f"Connector file not found: {path}")

    try:
        df = reader(path)
    except (pl.exceptions.PolarsError, OSError, ValueError) as e:
        raise BatchInputError(f"Failed to read connector file '{path}': {e}") from e

    return prepare_connectors(df)


def prepare_connectors(df: pl.DataFrame) -> pl.DataFrame:
    """Validate columns and normalize types of a connector DataFrame"""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise BatchInputError(f"Connector data is missing required columns: {', '.join(missing)}")

    if 'connector_id' not in df.columns:
        df = df.with_row_index('connector_id')

    try:
        return df.select(
            pl.col('connector_id').cast(pl.Utf8),
            *[pl.col(c).cast(pl.Float64) for c in REQUIRED_COLUMNS]
        )
    except pl.exceptions.PolarsError as e:
        raise BatchInputError(f"Connector coordinates must be numeric: {e}") from e


def _finite_or_none(value) -> Optional[float]:
    """Map NaN, infinite and missing coordinates to None"""
    if value is None or not math.isfinite(value):
        return None
    return value


def make_route_result(connector_id: str, start, end, points) -> RouteResultDict:
    """Build a result record for a routed connector"""
    polyline = [start, *points, end]
    return {
        'connector_id': str(connector_id),
        'start': [start[0], start[1]],
        'end': [end[0], end[1]],
        'points': [[p[0], p[1]] for p in points],
        'turns': count_turns(polyline),
    }


def route_connectors(df: pl.DataFrame, router: ElbowRouter) -> List[RouteResultDict]:
    """
    Route every connector in a DataFrame

    Rows with invalid coordinates or that hit a search limit are logged and
    recorded with an ``error`` instead of aborting the batch. Internal
    invariant faults propagate.

    Args:
        df: Connector DataFrame (see load_connectors)
        router: Router to use

    Returns:
        One result per row, in row order
    """
    df = prepare_connectors(df)
    results = []
    failures = 0

    for row in df.iter_rows(named=True):
        connector_id = row['connector_id']
        try:
            start = as_point((row['start_x'], row['start_y']), 'start')
            end = as_point((row['end_x'], row['end_y']), 'end')
            points = router.route(start, end)
        except RoutingInvariantError:
            raise
        except ElbowRouterError as e:
            failures += 1
            logger.warning(f"Could not route connector {connector_id}: {e}")
            results.append({
                'connector_id': str(connector_id),
                'start': [_finite_or_none(row['start_x']), _finite_or_none(row['start_y'])],
                'end': [_finite_or_none(row['end_x']), _finite_or_none(row['end_y'])],
                'points': [],
                'turns': 0,
                'error': str(e),
            })
            continue

        results.append(make_route_result(connector_id, start, end, points))

    logger.info(f"Routed {len(results) - failures}/{len(results)} connectors ({failures} failed)")
    return results
