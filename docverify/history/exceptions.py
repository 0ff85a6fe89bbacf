class HistoryError(Exception):
    """Base exception for history store errors."""


class HistorySerializationError(HistoryError):
    """Raised when a stored payload does not match the persisted record shape."""


class RecordNotFoundError(HistoryError):
    """Raised when no history entry exists for an id."""
