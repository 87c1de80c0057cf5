"""Build Result pipelines out of Result-returning functions.

Every stage receives the previous stage's value and returns a Result. The
pipeline starts from ``Success(initial)`` and stops at the first Failure, so
later stages never see an error.

Example:
    ```python
    parse = pipe(
        lambda s: try_catch(lambda: int(s), str),
        lambda n: success(n) if n > 0 else failure('not positive'),
    )
    parse('12')   # Success(value=12)
    parse('-3')   # Failure(error='not positive')
    parse('abc')  # Failure(error="invalid literal for int() with base 10: 'abc'")
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from resultkit.result import Result, Success, Tag

__all__ = ['compose', 'compose_async', 'pipe', 'pipe_async']

type Stage = Callable[[Any], Result[Any, Any]]
type AsyncStage = Callable[[Any], Awaitable[Result[Any, Any]]]


def _run(stages: Sequence[Stage], initial: Any) -> Result[Any, Any]:
    result: Result[Any, Any] = Success(initial)
    for stage in stages:
        result = result.flat_map(stage)
    return result


async def _run_async(stages: Sequence[AsyncStage], initial: Any) -> Result[Any, Any]:
    result: Result[Any, Any] = Success(initial)
    for stage in stages:
        if result.tag is Tag.FAILURE:
            break
        result = await stage(result.value)
    return result


def pipe(*fns: Stage) -> Callable[[Any], Result[Any, Any]]:
    """Chain ``fns`` left to right. With no functions the value passes through."""
    stages = tuple(fns)
    return lambda initial: _run(stages, initial)


def compose(*fns: Stage) -> Callable[[Any], Result[Any, Any]]:
    """Chain ``fns`` right to left: ``compose(f, g)(x)`` runs ``g`` first."""
    stages = tuple(reversed(fns))
    return lambda initial: _run(stages, initial)


def pipe_async(*fns: AsyncStage) -> Callable[[Any], Awaitable[Result[Any, Any]]]:
    """Async ``pipe``: each stage is awaited before the next one starts."""
    stages = tuple(fns)

    async def run(initial: Any) -> Result[Any, Any]:
        return await _run_async(stages, initial)

    return run


def compose_async(*fns: AsyncStage) -> Callable[[Any], Awaitable[Result[Any, Any]]]:
    """Async ``compose``: stages run right to left, one at a time."""
    stages = tuple(reversed(fns))

    async def run(initial: Any) -> Result[Any, Any]:
        return await _run_async(stages, initial)

    return run
