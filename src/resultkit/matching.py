"""Pattern matching over Results.

Patterns are explicit records built by four helpers and evaluated in order;
the first applicable one wins.

- ``on_success(handler)``: any Success.
- ``on_success_if(guard, handler)``: a Success whose value passes ``guard``.
- ``on_success_like(shape, handler)``: a Success whose value has every key of
  ``shape`` with a strictly equal entry.
- ``on_failure(handler)``: any Failure.

Example:
    ```python
    from resultkit import success
    from resultkit.matching import on_failure, on_success, on_success_if

    success(15).match([
        on_success_if(lambda n: n > 10, lambda n: f'large: {n}'),
        on_success(lambda n: f'small: {n}'),
        on_failure(lambda e: f'error: {e}'),
    ])
    # Success(value='large: 15')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any

import msgspec

from resultkit._logging import get_logger
from resultkit.errors import MatchError
from resultkit.result import Result, Success, Tag, is_result

__all__ = [
    'Pattern',
    'PatternKind',
    'match_patterns',
    'on_failure',
    'on_success',
    'on_success_if',
    'on_success_like',
]

logger = get_logger(__name__)

_SCALARS = (str, bytes, int, float, complex, type(None), Enum)
_MISSING = object()


class PatternKind(Enum):
    """How a pattern decides whether it applies."""

    BASIC = 'basic'
    GUARD = 'guard'
    DESTRUCTURE = 'destructure'
    FAILURE = 'failure'


class Pattern(msgspec.Struct, frozen=True):
    """One entry of a ``match`` pattern list.

    Attributes:
        kind: Which rule decides applicability.
        handler: Called with the value (or error) when the pattern wins.
        guard: Predicate for GUARD patterns.
        shape: Expected entries for DESTRUCTURE patterns.
    """

    kind: PatternKind
    handler: Callable[[Any], Any]
    guard: Callable[[Any], Any] | None = None
    shape: Mapping[Any, Any] | None = None

    def applies_to(self, result: Result[Any, Any]) -> bool:
        """Return True if this pattern matches ``result``."""
        if result.tag is Tag.FAILURE:
            return self.kind is PatternKind.FAILURE
        match self.kind:
            case PatternKind.FAILURE:
                return False
            case PatternKind.BASIC:
                return True
            case PatternKind.GUARD:
                return bool(self.guard(result.value))  # type: ignore[misc]
            case PatternKind.DESTRUCTURE:
                return _has_shape(result.value, self.shape)  # type: ignore[arg-type]


def on_success(handler: Callable[[Any], Any]) -> Pattern:
    """Match any Success."""
    return Pattern(PatternKind.BASIC, handler)


def on_success_if(guard: Callable[[Any], Any], handler: Callable[[Any], Any]) -> Pattern:
    """Match a Success whose value makes ``guard`` truthy."""
    return Pattern(PatternKind.GUARD, handler, guard=guard)


def on_success_like(shape: Mapping[Any, Any], handler: Callable[[Any], Any]) -> Pattern:
    """Match a Success whose value carries every entry of ``shape``.

    The value may be a mapping (keys are looked up) or any other object
    (keys are read as attribute names). Entries are compared shallowly:
    scalars by ``==``, everything else by identity. ``True`` never equals
    ``1`` and a NaN entry never matches.
    """
    return Pattern(PatternKind.DESTRUCTURE, handler, shape=dict(shape))


def _strict_equal(actual: Any, expected: Any) -> bool:
    # NaN never equals itself, not even the same float object.
    if isinstance(actual, float) and isinstance(expected, float):
        return actual == expected
    if actual is expected:
        return True
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    if isinstance(actual, _SCALARS) and isinstance(expected, _SCALARS):
        return actual == expected
    return False


def _lookup(value: Any, key: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(key, _MISSING)
    if isinstance(key, str):
        return getattr(value, key, _MISSING)
    return _MISSING


def _has_shape(value: Any, shape: Mapping[Any, Any]) -> bool:
    for key, expected in shape.items():
        actual = _lookup(value, key)
        if actual is _MISSING or not _strict_equal(actual, expected):
            return False
    return True


def _lift(output: Any) -> Result[Any, Any]:
    if is_result(output):
        return output
    return Success(output)


def match_patterns(result: Result[Any, Any], patterns: Iterable[Pattern]) -> Result[Any, Any]:
    """Run the first pattern in ``patterns`` that applies to ``result``.

    The winning handler receives the value (Success) or the error (Failure).
    A handler returning a Result has it passed through unchanged; any other
    return value is wrapped in Success.

    Raises:
        MatchError: If no pattern applies.
    """
    for pattern in patterns:
        if pattern.applies_to(result):
            payload = result.error if result.tag is Tag.FAILURE else result.value
            return _lift(pattern.handler(payload))

    if result.tag is Tag.FAILURE:
        message = 'No matching failure pattern found'
    else:
        message = 'No matching pattern found'
    logger.debug('match found no applicable pattern', tag=result.tag.value)
    raise MatchError(message)
