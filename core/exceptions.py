"""Custom exception classes for the Aries Virgo lookup service."""


class LookupServiceError(Exception):
    """Base exception for all lookup service errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BackendUnreachableError(LookupServiceError):
    """Raised when Solr cannot be reached (connection failure or timeout)."""

    pass


class BackendError(LookupServiceError):
    """Raised when Solr answers with a non-2xx status or an unusable body."""

    pass


class ItemNotFoundError(LookupServiceError):
    """Raised when no document matches the requested identifier."""

    pass


class AmbiguousMatchError(LookupServiceError):
    """Raised when more than one document matches the requested identifier."""

    pass


class ConfigurationError(LookupServiceError):
    """Raised when there's a configuration error."""

    pass
