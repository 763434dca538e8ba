"""Exceptions raised by transreduce."""

__all__ = ["TransformReduceError", "EmptySequenceError"]


class TransformReduceError(Exception):
    """Base class for all transreduce errors."""


class EmptySequenceError(TransformReduceError, ValueError):
    """Raised when a self-seeded fold is given an empty sequence.

    There is no first element to draw the seed from, so the fold has no
    starting point and no meaningful partial result.
    """

    def __init__(self, msg: str = "Cannot self-seed a fold from an empty sequence."):
        super().__init__(msg)
