"""
Custom exceptions for exporters module
"""

from ..core.exceptions import ElbowRouterError


class ExporterError(ElbowRouterError):
    """Base exception for all exporter errors"""
    pass


class InvalidResultsError(ExporterError):
    """Raised when a route results list has invalid structure"""
    pass


class FileExportError(ExporterError):
    """Raised when file export operations fail"""
    pass


class PathValidationError(ExporterError):
    """Raised when file path is invalid or unsafe"""
    pass
