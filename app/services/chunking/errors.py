"""Chunking errors."""


class InvalidParameterError(ValueError):
    """Raised when chunking parameters or the method name are invalid. No chunks are produced."""
