"""Exceptions raised by the bounded containers."""


class OverflowError_(OverflowError):
    """Raised when a value is added to a container that is already full."""


class UnderflowError(IndexError):
    """Raised when a value is taken from a container that is empty."""