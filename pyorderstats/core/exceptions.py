"""
Exception hierarchy for pyorderstats.

All exceptions inherit from PyOrderStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyOrderStatsError(Exception):
    """Base exception for all pyorderstats errors."""
    pass


class ValidationError(PyOrderStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a container is built from anything but 1D data, or when
    a validity mask does not match the length of its values.
    """
    pass


class InvalidQuantileError(ValidationError):
    """
    Requested quantile lies outside [0, 1].

    Raised once, when a quantile request is constructed, before any
    selection or sorting runs. NaN is rejected as well.

    Attributes:
        quantile: The rejected value
    """

    def __init__(self, message: str, quantile: float | None = None):
        super().__init__(message)
        self.quantile = quantile
