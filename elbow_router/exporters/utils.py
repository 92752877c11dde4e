"""
Utility functions for exporters
"""

import os
import html
import math
import logging
from pathlib import Path
from typing import Any, List

from .exceptions import PathValidationError, InvalidResultsError
from .types import RouteResultDict

logger = logging.getLogger(__name__)

# Constants
MAX_FILENAME_LENGTH = 255
DEFAULT_JSON_FILENAME = "routes.json"
DEFAULT_SVG_FILENAME = "routes.svg"
REQUIRED_RESULT_KEYS = ('connector_id', 'start', 'end', 'points', 'turns')


def validate_file_path(file_path: str, must_exist: bool = False) -> Path:
    """
    Validate and sanitize file path for export operations

    Args:
        file_path: Path to validate
        must_exist: Whether parent directory must exist

    Returns:
        Validated Path object

    Raises:
        PathValidationError: If path is invalid or unsafe

    Examples:
        >>> validate_file_path("routes.json")  # doctest: +SKIP
        PosixPath('/current/dir/routes.json')
    """
    if not file_path or not isinstance(file_path, str):
        raise PathValidationError(f"File path must be a non-empty string, got: {type(file_path)}")

    filename = os.path.basename(file_path)
    if len(filename) > MAX_FILENAME_LENGTH:
        raise PathValidationError(
            f"Filename too long ({len(filename)} chars). Maximum is {MAX_FILENAME_LENGTH}"
        )

    try:
        path = Path(file_path).resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid file path: {e}")

    if must_exist:
        parent = path.parent
        if not parent.exists():
            raise PathValidationError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise PathValidationError(f"Parent path is not a directory: {parent}")

    # Check for reserved names on Windows
    reserved_names = {'CON', 'PRN', 'AUX', 'NUL', 'COM1', 'COM2', 'COM3', 'COM4',
                     'COM5', 'COM6', 'COM7', 'COM8', 'COM9', 'LPT1', 'LPT2',
                     'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'}
    if path.stem.upper() in reserved_names:
        raise PathValidationError(f"Reserved filename: {filename}")

    return path


def escape_html(text: Any) -> str:
    """
    Escape text for safe SVG/XML output

    Examples:
        >>> escape_html("<a & b>")
        '&lt;a &amp; b&gt;'
    """
    return html.escape(str(text))


def _is_pair(value: Any) -> bool:
    """Check value is a two-element sequence of finite numbers"""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False
    return all(
        isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
        for v in value
    )


def validate_route_results(results: Any) -> List[RouteResultDict]:
    """
    Validate that route results have the expected structure

    Args:
        results: List of route result dictionaries

    Returns:
        Validated results list

    Raises:
        InvalidResultsError: If results structure is invalid
    """
    if not isinstance(results, list):
        raise InvalidResultsError(f"Results must be a list, got: {type(results)}")

    for index, result in enumerate(results):
        if not isinstance(result, dict):
            raise InvalidResultsError(f"Result {index} must be a dictionary, got: {type(result)}")

        for key in REQUIRED_RESULT_KEYS:
            if key not in result:
                raise InvalidResultsError(f"Result {index} is missing required key: {key}")

        # Failed connectors carry an error and may hold placeholder geometry
        if result.get('error'):
            continue

        if not _is_pair(result['start']) or not _is_pair(result['end']):
            raise InvalidResultsError(f"Result {index} start/end must be (x, y) pairs of finite numbers")

        if not isinstance(result['points'], list) or not all(_is_pair(p) for p in result['points']):
            raise InvalidResultsError(f"Result {index} points must be a list of (x, y) pairs")

    return results
