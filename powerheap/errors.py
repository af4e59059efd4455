class PowerHeapError(Exception):
    """Base class for every error raised by the heap."""


class InvalidConfigurationError(PowerHeapError, ValueError):
    """Raised at construction when the exponent or capacity is unusable."""


class MissingValueError(PowerHeapError, ValueError):
    """Raised when ``None`` is offered as an element."""


class EmptyHeapError(PowerHeapError, RuntimeError):
    """Raised when reading from a heap with no elements."""
