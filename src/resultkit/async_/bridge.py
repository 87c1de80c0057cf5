"""Await an awaitable and capture its outcome as a Result.

Example:
    ```python
    async def load(user_id: int) -> dict[str, Any]:
        ...

    async def main():
        result = await from_awaitable(load(1), lambda e: f'load failed: {e}')
        user, error = await from_awaitable_tuple(load(2))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from resultkit._logging import get_logger
from resultkit.result import Failure, Result, Success

__all__ = ['capture_async', 'from_awaitable', 'from_awaitable_tuple']

logger = get_logger(__name__)


async def capture_async[A](
    start: Callable[[], Awaitable[A]],
    *,
    catch: tuple[type[BaseException], ...] = (Exception,),
    on_error: Callable[[Any], Any] | None = None,
    event: str = 'captured exception',
    **context: Any,
) -> Result[A, Any]:
    """Start an awaitable with ``start()``, await it, and capture the outcome.

    Async counterpart of ``resultkit.result.capture``, shared by
    ``from_awaitable`` and ``@safe_async``. An exception raised while starting
    is captured the same way as one raised while awaiting.
    """
    try:
        value = await start()
    except catch as e:
        logger.debug(event, exc_type=type(e).__name__, **context)
        return Failure(on_error(e) if on_error is not None else e)
    return Success(value)


@overload
async def from_awaitable[A](aw: Awaitable[A]) -> Result[A, Exception]: ...


@overload
async def from_awaitable[A, E](aw: Awaitable[A], on_error: Callable[[Exception], E]) -> Result[A, E]: ...


async def from_awaitable(aw: Awaitable[Any], on_error: Callable[[Exception], Any] | None = None) -> Result[Any, Any]:
    """Await ``aw`` and wrap the outcome.

    Args:
        aw: Any awaitable (coroutine, task, future).
        on_error: Maps a raised exception to the Failure's error. Without it
            the exception itself is stored.

    Returns:
        ``Success(value)`` if the awaitable completed, otherwise a Failure.

    Note:
        Only ``Exception`` subclasses are captured. Cancellation and other
        ``BaseException``s propagate to the caller.
    """
    return await capture_async(lambda: aw, on_error=on_error, event='from_awaitable captured exception')


async def from_awaitable_tuple[A](aw: Awaitable[A]) -> tuple[A, None] | tuple[None, Exception]:
    """Await ``aw`` and return ``(value, None)`` or ``(None, exception)``."""
    result = await from_awaitable(aw)
    return result.unwrap()
