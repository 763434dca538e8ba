"""Functional primitives for transreduce.

This module provides the transform-reduce fold and the reductions built on
it. Utilities are designed to be stateless and side-effect-free so they can
be composed freely.
"""

from transreduce.functional.reduce import (
    identity,
    self_seeded_transform_reduce,
    transform_reduce,
)
from transreduce.functional.words import format_summary, join_words, sum_lengths

__all__ = [
    "identity",
    "transform_reduce",
    "self_seeded_transform_reduce",
    "join_words",
    "sum_lengths",
    "format_summary",
]
