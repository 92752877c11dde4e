"""
Custom exceptions for elbow connector routing
"""


class ElbowRouterError(Exception):
    """Base exception for all routing errors"""
    pass


class InvalidPointError(ElbowRouterError, ValueError):
    """Raised when an input point is malformed or has non-finite coordinates"""
    pass


class InvalidHeadingError(ElbowRouterError, ValueError):
    """Raised when a departure heading points away from the arrival waypoint"""
    pass


class RouteDistanceExceededError(ElbowRouterError):
    """Raised when a route exceeds the configured grid distance cap"""
    pass


class SearchLimitExceededError(ElbowRouterError):
    """Raised when the search expands more states than the configured limit"""
    pass


class RoutingInvariantError(ElbowRouterError, RuntimeError):
    """
    Raised when the search exhausts its open set.

    The grid is unbounded and fully connected, so this indicates a bug in
    edge generation rather than a recoverable runtime condition.
    """
    pass


class ConfigurationError(ElbowRouterError, ValueError):
    """Raised when router configuration is invalid"""
    pass


class BatchInputError(ElbowRouterError):
    """Raised when a batch connector file cannot be loaded"""
    pass
