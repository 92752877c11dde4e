"""
Export route results to JSON format
"""

import json
import logging
from typing import List, Optional

from .types import RouteResultDict
from .exceptions import FileExportError, PathValidationError
from .utils import validate_file_path, validate_route_results

logger = logging.getLogger(__name__)


def export_to_json(
    results: List[RouteResultDict],
    file_path: Optional[str] = None,
    indent: int = 2
) -> str:
    """
    Export route results to JSON format

    Args:
        results: List of route result dictionaries
        file_path: Optional path to save JSON file. If None, only returns JSON string
        indent: Number of spaces for indentation (default: 2)

    Returns:
        JSON string representation of results

    Raises:
        InvalidResultsError: If results have invalid structure
        PathValidationError: If file_path is invalid or unsafe
        FileExportError: If file write operation fails
    """
    validated_results = validate_route_results(results)

    try:
        json_str = json.dumps({'routes': validated_results}, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed: {e}")
        raise FileExportError(f"Failed to serialize results to JSON: {e}") from e

    if file_path:
        try:
            validated_path = validate_file_path(file_path, must_exist=True)
            validated_path.write_text(json_str, encoding='utf-8')
            logger.info(f"JSON results exported to: {validated_path}")

        except PathValidationError:
            raise
        except OSError as e:
            logger.error(f"Failed to write JSON file: {e}")
            raise FileExportError(f"Failed to write file '{file_path}': {e}") from e

    return json_str
