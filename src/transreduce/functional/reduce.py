"""Transform-reduce folds.

This module provides the left-fold primitive the rest of the package is built
on. Each element of a sequence is first passed through a ``project`` function
and the result is merged into a running accumulator with a ``combine``
function. Elements are always folded strictly left to right, so ``combine``
is free to be non-associative and non-commutative (string concatenation with
a separator being the canonical example).

Two seeding strategies are supported:

    - **Seeded**: :func:`transform_reduce` starts from a caller supplied seed
      and folds in every element. An empty sequence returns the seed.
    - **Self-seeded**: :func:`self_seeded_transform_reduce` takes the first
      element of the sequence as the seed and folds in the remaining ones.
      Whether that first element is projected is controlled by
      ``project_seed``. An empty sequence raises
      :class:`~transreduce.core.errors.EmptySequenceError`.

Example:
    >>> from transreduce.functional.reduce import (
    ...     transform_reduce,
    ...     self_seeded_transform_reduce,
    ... )
    >>> words = ["C++", "is", "insane"]
    >>> self_seeded_transform_reduce(words, lambda a, b: a + "-" + b)
    'C++-is-insane'
    >>> transform_reduce(words, 0, lambda a, b: a + b, len)
    11

See Also:
    - :mod:`transreduce.functional.words`: Canned reductions over strings.
"""

import typing as tp

from transreduce.core.errors import EmptySequenceError
from transreduce.logger.logger import logger

__all__ = ["identity", "transform_reduce", "self_seeded_transform_reduce"]

E = tp.TypeVar("E")
P = tp.TypeVar("P")
R = tp.TypeVar("R")


def identity(value: E) -> E:
    """Return ``value`` unchanged."""
    return value


def _fold(
    acc: R,
    elements: tp.Iterator[E],
    combine: tp.Callable[[R, P], R],
    project: tp.Callable[[E], P],
) -> tp.Tuple[R, int]:
    count = 0
    for element in elements:
        acc = combine(acc, project(element))
        count += 1
    return acc, count


def transform_reduce(
    sequence: tp.Iterable[E],
    seed: R,
    combine: tp.Callable[[R, P], R],
    project: tp.Callable[[E], P],
) -> R:
    """Fold projected elements into ``seed`` from left to right.

    Computes ``combine(...combine(combine(seed, project(x0)), project(x1))...)``
    over every element of ``sequence``.

    Args:
        sequence (Iterable): Finite ordered elements. Consumed once, never
            mutated.
        seed: Initial accumulator value.
        combine (Callable): Binary function ``(acc, projected) -> acc``.
        project (Callable): Unary function applied to each element before it
            is combined.

    Returns:
        The final accumulator. ``seed`` itself when ``sequence`` is empty, in
        which case neither ``combine`` nor ``project`` is called.
    """
    result, count = _fold(seed, iter(sequence), combine, project)
    logger.debug(f"transform_reduce folded {count} elements")
    return result


def self_seeded_transform_reduce(
    sequence: tp.Iterable[E],
    combine: tp.Callable[[R, P], R],
    project: tp.Callable[[E], P] = identity,
    *,
    project_seed: bool = False,
) -> R:
    """Fold projected elements into the sequence's own first element.

    The first element becomes the accumulator and folding starts from the
    second element. With ``project_seed=False`` the raw first element is
    used as is; with ``project_seed=True`` it is passed through ``project``
    first, which makes the fold symmetric over all elements.

    Args:
        sequence (Iterable): Finite ordered elements. Consumed once, never
            mutated.
        combine (Callable): Binary function ``(acc, projected) -> acc``.
        project (Callable): Unary function applied to every element after
            the first (and to the first when ``project_seed`` is set).
            Defaults to :func:`identity`.
        project_seed (bool): Whether to project the seed element.

    Returns:
        The final accumulator. For a single-element sequence this is the
        seed and ``combine`` is never called.

    Raises:
        EmptySequenceError: If ``sequence`` has no elements.
    """
    elements = iter(sequence)
    try:
        first = next(elements)
    except StopIteration:
        raise EmptySequenceError() from None

    seed = project(first) if project_seed else first
    result, count = _fold(seed, elements, combine, project)
    logger.debug(f"self_seeded_transform_reduce folded {count + 1} elements")
    return result
