"""Errors raised by Generator operations."""

from enum import Enum


class ErrorType(Enum):
    """Classification of generator precondition failures."""

    EMPTY_COLLECTION = "empty_collection"
    INSUFFICIENT_ELEMENTS = "insufficient_elements"
    INVALID_RANGE = "invalid_range"


class GeneratorError(Exception):
    """Raised when a Generator operation is called with unusable arguments."""

    error_type: ErrorType

    def __init__(self, message: str):
        """Initialize generator error.

        Args:
            message: Human-readable error message
        """
        self.message = message
        super().__init__(message)


class EmptyCollectionError(GeneratorError, IndexError):
    """Raised when choosing from an empty sequence."""

    error_type = ErrorType.EMPTY_COLLECTION


class InsufficientElementsError(GeneratorError, IndexError):
    """Raised when a pluck has no eligible elements left."""

    error_type = ErrorType.INSUFFICIENT_ELEMENTS

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Cannot pluck from {length} element(s) while holding back {limit}"
        )


class InvalidRangeError(GeneratorError, ValueError):
    """Raised when an integer range or pluck limit is empty or negative."""

    error_type = ErrorType.INVALID_RANGE
