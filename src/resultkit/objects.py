"""Result-aware operators over mappings.

Like the sequence operators, each one is configured first and then applied
to a mapping:

    ```python
    from resultkit.objects import get_path, pick

    pick(['id', 'name'], lambda key: f'missing {key}')({'id': 1, 'name': 'ada', 'age': 36})
    # Success(value={'id': 1, 'name': 'ada'})
    get_path(['user', 'address', 'city'], lambda path: f'no {path}')({'user': {}})
    # Failure(error='no user.address.city')
    ```

A key counts as present when it is in the mapping, whatever its value; a
stored ``None`` is a value, not a gap. The input mapping is never modified
and every Success carries a new dict or list.
"""

from __future__ import annotations

import dataclasses
from collections import deque
from collections.abc import Callable, Iterable, Mapping, MutableSequence, MutableSet
from typing import Any

import msgspec

from resultkit.config import get_settings
from resultkit.result import Failure, Result, Success, Tag

__all__ = [
    'clone',
    'compact',
    'defaults',
    'entries',
    'filter_values',
    'get_path',
    'has',
    'is_object_empty',
    'keys',
    'map_values',
    'merge',
    'omit',
    'pick',
    'prop',
    'values',
]

_MISSING = object()


def prop[K, V, E](key: K, on_missing: Callable[[], E]) -> Callable[[Mapping[K, V]], Result[V, E]]:
    """Read a single key.

    Example:
        >>> prop('name', lambda: 'no name')({'name': None})
        Success(value=None)
        >>> prop('name', lambda: 'no name')({})
        Failure(error='no name')
    """

    def apply(obj: Mapping[K, V]) -> Result[V, E]:
        value = obj.get(key, _MISSING)
        if value is _MISSING:
            return Failure(on_missing())
        return Success(value)

    return apply


def pick[K, V, E](keys: Iterable[K], on_missing: Callable[[K], E]) -> Callable[[Mapping[K, V]], Result[dict[K, V], E]]:
    """Copy the listed keys into a new dict. The first absent key fails."""
    wanted = list(keys)

    def apply(obj: Mapping[K, V]) -> Result[dict[K, V], E]:
        picked: dict[K, V] = {}
        for key in wanted:
            if key not in obj:
                return Failure(on_missing(key))
            picked[key] = obj[key]
        return Success(picked)

    return apply


def omit[K, V](keys: Iterable[K]) -> Callable[[Mapping[K, V]], Success[dict[K, V]]]:
    """Copy every key except the listed ones. Always succeeds."""
    dropped = frozenset(keys)
    return lambda obj: Success({k: v for k, v in obj.items() if k not in dropped})


def get_path[E](path: Iterable[Any], on_missing: Callable[[str], E]) -> Callable[[Any], Result[Any, E]]:
    """Walk nested mappings one segment at a time.

    The walk fails with ``on_missing('a.b.c')`` (the whole path joined by
    dots) as soon as the current node is None, is not a mapping, or lacks
    the next segment. An empty path returns the input itself.
    """
    segments = list(path)
    joined = '.'.join(str(segment) for segment in segments)

    def apply(obj: Any) -> Result[Any, E]:
        current = obj
        for segment in segments:
            if not isinstance(current, Mapping) or segment not in current:
                return Failure(on_missing(joined))
            current = current[segment]
        return Success(current)

    return apply


def map_values[K, V, U, E, F](
    fn: Callable[[V, K], Result[U, E]],
    on_error: Callable[[E, K], F],
) -> Callable[[Mapping[K, V]], Result[dict[K, U], F]]:
    """Transform every value with ``fn(value, key)``.

    The first Failure stops the walk and becomes ``failure(on_error(error, key))``.
    """

    def apply(obj: Mapping[K, V]) -> Result[dict[K, U], F]:
        mapped: dict[K, U] = {}
        for key, value in obj.items():
            result = fn(value, key)
            if result.tag is Tag.FAILURE:
                return Failure(on_error(result.error, key))
            mapped[key] = result.value
        return Success(mapped)

    return apply


def filter_values[K, V, E, F](
    predicate: Callable[[V, K], Result[bool, E]],
    on_error: Callable[[E, K], F],
) -> Callable[[Mapping[K, V]], Result[dict[K, V], F]]:
    """Keep the entries whose ``predicate(value, key)`` holds a truthy value."""

    def apply(obj: Mapping[K, V]) -> Result[dict[K, V], F]:
        kept: dict[K, V] = {}
        for key, value in obj.items():
            result = predicate(value, key)
            if result.tag is Tag.FAILURE:
                return Failure(on_error(result.error, key))
            if result.value:
                kept[key] = value
        return Success(kept)

    return apply


def merge[K, V, E](
    resolver: Callable[[K, V, V], Result[V, E]],
) -> Callable[..., Result[dict[K, V], E]]:
    """Fold several mappings into a new dict, left to right.

    On a key collision ``resolver(key, current, incoming)`` decides the
    value. A Failure from the resolver aborts the whole merge.

    Example:
        ```python
        keep_larger = merge(lambda key, a, b: success(max(a, b)))
        keep_larger({'x': 1, 'y': 5}, {'x': 3})
        # Success(value={'x': 3, 'y': 5})
        ```
    """

    def apply(*sources: Mapping[K, V]) -> Result[dict[K, V], E]:
        merged: dict[K, V] = {}
        for source in sources:
            for key, incoming in source.items():
                if key not in merged:
                    merged[key] = incoming
                    continue
                result = resolver(key, merged[key], incoming)
                if result.tag is Tag.FAILURE:
                    return result
                merged[key] = result.value
        return Success(merged)

    return apply


def defaults[K, V](fallbacks: Mapping[K, V]) -> Callable[[Mapping[K, V]], Success[dict[K, V]]]:
    """Fill in keys that are absent from the mapping. Present keys win, even when None."""
    return lambda obj: Success({**fallbacks, **obj})


def compact() -> Callable[[Mapping[Any, Any]], Success[dict[Any, Any]]]:
    """Drop entries whose value is None."""
    return lambda obj: Success({k: v for k, v in obj.items() if v is not None})


def _default_depth_error(depth: int) -> str:
    return f'Maximum clone depth exceeded at depth {depth}'


def _is_container(value: Any) -> bool:
    if callable(value):
        return False
    if isinstance(value, Mapping | list | tuple | MutableSequence | set | frozenset | MutableSet | msgspec.Struct):
        return True
    return dataclasses.is_dataclass(value)


def _children(value: Any) -> list[Any]:
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, msgspec.Struct):
        return [getattr(value, name) for name in value.__struct_fields__]
    if dataclasses.is_dataclass(value):
        return [getattr(value, f.name) for f in dataclasses.fields(value) if f.init]
    if isinstance(value, bytearray):
        return []
    return list(value)


def _rebuild(source: Any, items: list[Any]) -> Any:
    if isinstance(source, Mapping):
        return dict(zip(source.keys(), items, strict=True))
    if isinstance(source, msgspec.Struct):
        return msgspec.structs.replace(source, **dict(zip(source.__struct_fields__, items, strict=True)))
    if dataclasses.is_dataclass(source):
        names = [f.name for f in dataclasses.fields(source) if f.init]
        return dataclasses.replace(source, **dict(zip(names, items, strict=True)))
    match source:
        case list():
            return items
        case bytearray():
            return bytearray(source)
        case deque():
            return deque(items, maxlen=source.maxlen)
        case tuple() if hasattr(source, '_fields'):
            return type(source)._make(items)
    return type(source)(items)


class _Frame:
    """One container being copied: its pending children and the copies made so far."""

    __slots__ = ('copies', 'depth', 'pending', 'source')

    def __init__(self, source: Any, depth: int) -> None:
        self.source = source
        self.depth = depth
        self.pending = _children(source)[::-1]
        self.copies: list[Any] = []


def clone[E](
    max_depth: int | None = None,
    clone_functions: bool = False,  # noqa: FBT001, FBT002, ARG001
    on_depth_exceeded: Callable[[int], E] = _default_depth_error,  # type: ignore[assignment]
) -> Callable[[Any], Result[Any, E]]:
    """Deep-copy nested containers with a depth limit.

    Mappings become dicts. Lists, tuples (named ones included), deques,
    bytearrays, sets, other sequences and sets, dataclass instances and
    msgspec structs are rebuilt with their own type. Strings, bytes, numbers
    and callables are shared by reference; ``clone_functions`` is accepted
    for call-site compatibility and does not change that.

    The root sits at depth 0. Entering a container at a depth greater than
    ``max_depth`` fails with ``on_depth_exceeded(depth)`` instead of
    truncating. The walk keeps its own stack, so very deep and
    self-referencing structures end in that Failure rather than in a
    ``RecursionError``.

    Args:
        max_depth: Deepest container level allowed. Defaults to
            ``get_settings().clone_max_depth``.
        clone_functions: Ignored.
        on_depth_exceeded: Maps the offending depth to the Failure's error.

    Example:
        >>> clone(max_depth=1, on_depth_exceeded=lambda d: f'too deep {d}')({'a': {'b': {'c': 1}}})
        Failure(error='too deep 2')
    """
    limit = max_depth if max_depth is not None else get_settings().clone_max_depth

    def apply(value: Any) -> Result[Any, E]:
        if not _is_container(value):
            return Success(value)
        if limit < 0:
            return Failure(on_depth_exceeded(0))

        stack = [_Frame(value, 0)]
        while True:
            frame = stack[-1]
            if frame.pending:
                child = frame.pending.pop()
                if not _is_container(child):
                    frame.copies.append(child)
                    continue
                depth = frame.depth + 1
                if depth > limit:
                    return Failure(on_depth_exceeded(depth))
                stack.append(_Frame(child, depth))
                continue

            stack.pop()
            copied = _rebuild(frame.source, frame.copies)
            if not stack:
                return Success(copied)
            stack[-1].copies.append(copied)

    return apply


def keys() -> Callable[[Mapping[Any, Any]], Success[list[Any]]]:
    """List the keys."""
    return lambda obj: Success(list(obj.keys()))


def values() -> Callable[[Mapping[Any, Any]], Success[list[Any]]]:
    """List the values."""
    return lambda obj: Success(list(obj.values()))


def entries() -> Callable[[Mapping[Any, Any]], Success[list[tuple[Any, Any]]]]:
    """List the ``(key, value)`` pairs."""
    return lambda obj: Success(list(obj.items()))


def has(key: Any) -> Callable[[Mapping[Any, Any]], Success[bool]]:
    """Report whether ``key`` is present."""
    return lambda obj: Success(key in obj)


def is_object_empty() -> Callable[[Mapping[Any, Any]], Success[bool]]:
    """Report whether the mapping has no entries."""
    return lambda obj: Success(len(obj) == 0)
