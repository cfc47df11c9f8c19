"""Custom exception hierarchy for estate-sim."""


class EstateSimError(Exception):
    """Base exception for all estate-sim errors."""


class InvalidRecordStateError(EstateSimError):
    """Raised when a record is in an invalid state for the operation."""


class ImmutableFieldError(InvalidRecordStateError):
    """Raised when a construction-time field is reassigned."""


class ValuationError(EstateSimError):
    """Raised when a valuation provider returns malformed data."""


class ConfigurationError(EstateSimError):
    """Raised when configuration is invalid or missing."""


class ReportError(EstateSimError):
    """Raised when a report cannot be written."""
