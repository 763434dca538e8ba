"""Reductions over sequences of words."""

import operator
import typing as tp

from transreduce.functional.reduce import (
    identity,
    self_seeded_transform_reduce,
    transform_reduce,
)

__all__ = [
    "DEFAULT_WORDS",
    "DEFAULT_SEPARATOR",
    "SUMMARY_SEPARATOR",
    "join_words",
    "sum_lengths",
    "format_summary",
]

DEFAULT_WORDS: tp.Tuple[str, ...] = ("C++", "is", "insane")
DEFAULT_SEPARATOR = "-"
SUMMARY_SEPARATOR = " | total chars: "


def join_words(words: tp.Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join ``words`` in order with ``separator`` between adjacent pairs.

    Args:
        words: Non-empty sequence of strings.
        separator: String inserted between each adjacent pair.

    Returns:
        The joined string, or the only word for a single-element sequence.

    Raises:
        EmptySequenceError: If ``words`` is empty.
    """
    return self_seeded_transform_reduce(
        words, lambda acc, word: acc + separator + word, identity
    )


def sum_lengths(words: tp.Iterable[str]) -> int:
    """Total number of characters across ``words``; ``0`` when empty."""
    return transform_reduce(words, 0, operator.add, len)


def format_summary(
    words: tp.Iterable[str], separator: str = DEFAULT_SEPARATOR
) -> str:
    """Render ``"<joined> | total chars: <n>"`` for ``words``.

    ``words`` is read once, so generators are accepted.

    Raises:
        EmptySequenceError: If ``words`` is empty.
    """
    words = tuple(words)
    return f"{join_words(words, separator)}{SUMMARY_SEPARATOR}{sum_lengths(words)}"
