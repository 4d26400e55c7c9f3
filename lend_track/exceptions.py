"""Custom exception hierarchy for lend-track."""


class LendTrackError(Exception):
    """Base exception for all lend-track errors."""


class EntityNotFoundError(LendTrackError):
    """Raised when a referenced loan, payment or MOI entry does not exist."""


class ValidationError(LendTrackError):
    """Raised when input to a write path is malformed."""


class InvalidEntityStateError(LendTrackError):
    """Raised when an entity is in an invalid state for the operation."""


class StoreError(LendTrackError):
    """Raised when the record store fails to read or write."""


class ConfigurationError(LendTrackError):
    """Raised when configuration is invalid or missing."""


class SinkError(LendTrackError):
    """Raised when a sink operation fails."""
