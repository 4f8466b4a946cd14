class FunkError(Exception):
    """Base class for every error raised by funkchain."""


class PreconditionError(FunkError, ValueError):
    """Raised when a constructor receives bounds it cannot honour."""


class EmptyInputError(FunkError, ValueError):
    """Raised when an operation needs at least one element and got none."""


class ShapeError(FunkError, TypeError):
    """Raised when an argument does not have the expected shape or kind."""
