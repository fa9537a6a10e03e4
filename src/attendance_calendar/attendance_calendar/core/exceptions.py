class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced entity (e.g. employee) does not exist."""


class DataSourceError(DomainError):
    """Raised when a mandatory data source (punches) cannot be read."""


class CacheWriteError(DomainError):
    """Raised when the durable per-day cache rejects a write."""
