"""Domain-specific exceptions for the expense ledger core."""

class ValidationError(ValueError):
    """Raised when provided data does not meet validation requirements."""


class PersistenceError(IOError):
    """Raised when the persistence layer cannot read or write the store."""


class DeserializationError(PersistenceError):
    """Raised when persisted content is not a valid sequence of expense records."""


class NoDataError(LookupError):
    """Raised when a report is requested over an empty set of expenses."""
