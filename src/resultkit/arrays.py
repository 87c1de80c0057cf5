"""Result-aware operators over sequences.

Operators are configured first and then applied to a sequence, so they slot
into ``pipe``/``compose`` and ``flat_map`` chains:

    ```python
    from resultkit import success
    from resultkit.arrays import map_

    success([1, 2, 3]).flat_map(map_(lambda x: success(x * 2)))
    # Success(value=[2, 4, 6])
    ```

The element functions return Results. Iteration stops at the first Failure,
which becomes the overall result. Inputs are never modified; every Success
carries a new list.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from resultkit.decorators import safe
from resultkit.result import Failure, Result, Success, Tag

__all__ = [
    'filter_',
    'get',
    'head',
    'is_empty',
    'length',
    'map_',
    'reduce_',
    'safe_array_op',
    'tail',
]


def map_[T, U, E](fn: Callable[[T], Result[U, E]]) -> Callable[[Sequence[T]], Result[list[U], E]]:
    """Apply ``fn`` to every element, collecting the values.

    Examples:
        >>> map_(lambda x: success(x * 2))([1, 2, 3])
        Success(value=[2, 4, 6])
        >>> map_(lambda x: failure('neg') if x < 0 else success(x))([1, -2, 3])
        Failure(error='neg')
    """

    def apply(seq: Sequence[T]) -> Result[list[U], E]:
        values: list[U] = []
        for item in seq:
            result = fn(item)
            if result.tag is Tag.FAILURE:
                return result
            values.append(result.value)
        return Success(values)

    return apply


def filter_[T, E](predicate: Callable[[T], Result[bool, E]]) -> Callable[[Sequence[T]], Result[list[T], E]]:
    """Keep the elements whose predicate Result holds a truthy value."""

    def apply(seq: Sequence[T]) -> Result[list[T], E]:
        kept: list[T] = []
        for item in seq:
            result = predicate(item)
            if result.tag is Tag.FAILURE:
                return result
            if result.value:
                kept.append(item)
        return Success(kept)

    return apply


def reduce_[T, U, E](fn: Callable[[U, T], Result[U, E]], initial: U) -> Callable[[Sequence[T]], Result[U, E]]:
    """Fold the sequence from the left, threading the accumulator through Results.

    Example:
        >>> reduce_(lambda acc, x: success(acc + x), 0)([1, 2, 3, 4])
        Success(value=10)
    """

    def apply(seq: Sequence[T]) -> Result[U, E]:
        acc = initial
        for item in seq:
            result = fn(acc, item)
            if result.tag is Tag.FAILURE:
                return result
            acc = result.value
        return Success(acc)

    return apply


def head[T, E](seq: Sequence[T], on_empty: Callable[[], E]) -> Result[T, E]:
    """Return the first element, or ``failure(on_empty())`` for an empty sequence."""
    if len(seq) == 0:
        return Failure(on_empty())
    return Success(seq[0])


def tail[T](seq: Sequence[T]) -> Success[list[T]]:
    """Return every element but the first. An empty sequence gives an empty list."""
    return Success(list(seq[1:]))


def get[T, E](index: int, on_out_of_bounds: Callable[[int], E]) -> Callable[[Sequence[T]], Result[T, E]]:
    """Look up ``index``; negative or past-the-end indexes fail."""

    def apply(seq: Sequence[T]) -> Result[T, E]:
        if index < 0 or index >= len(seq):
            return Failure(on_out_of_bounds(index))
        return Success(seq[index])

    return apply


def is_empty() -> Callable[[Sequence[Any]], Success[bool]]:
    """Report whether the sequence has no elements."""
    return lambda seq: Success(len(seq) == 0)


def length() -> Callable[[Sequence[Any]], Success[int]]:
    """Report the number of elements."""
    return lambda seq: Success(len(seq))


def safe_array_op[T, U](
    fn: Callable[[Sequence[T]], U],
    on_error: Callable[[Exception], Any] | None = None,
) -> Callable[[Sequence[T]], Result[U, Any]]:
    """Wrap a plain sequence function so that exceptions become Failures.

    The Failure holds ``on_error(exc)``, or the exception when no mapper is given.

    Example:
        >>> safe_array_op(max)([])
        Failure(error=ValueError('max() iterable argument is empty'))
    """
    return safe(on_error=on_error)(fn)
