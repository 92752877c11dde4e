"""
Export functionality for route results

This module provides multiple export formats for routed connectors:
- JSON: Machine-readable format for integration with other tools
- DataFrame: Polars DataFrames (per-vertex and per-connector) for CSV/Parquet
- SVG: Standalone drawing of every connector as an arrow
"""

from .dataframe_export import export_to_dataframe, export_summary_to_dataframe
from .json_export import export_to_json
from .svg_export import export_to_svg

from .exceptions import (
    ExporterError,
    InvalidResultsError,
    FileExportError,
    PathValidationError
)

from .types import RouteResultDict

__all__ = [
    "export_to_dataframe",
    "export_summary_to_dataframe",
    "export_to_json",
    "export_to_svg",
    "ExporterError",
    "InvalidResultsError",
    "FileExportError",
    "PathValidationError",
    "RouteResultDict",
]
