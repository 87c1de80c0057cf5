"""@safe and @safe_async: turn raising functions into Result-returning ones.

Both decorators run the wrapped call through the same capture path as
``try_catch`` and ``from_awaitable``, so an exception is logged and mapped
the same way wherever it enters Result-space.

    ```python
    @safe(exceptions=(ValueError,), on_error=lambda e: f'bad port: {e}')
    def parse_port(text: str) -> int:
        port = int(text)
        if not 0 < port < 65536:
            raise ValueError(port)
        return port

    parse_port('8080')   # Success(value=8080)
    parse_port('99999')  # Failure(error='bad port: 99999')
    parse_port(None)     # raises TypeError: not in ``exceptions``
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from resultkit.async_.bridge import capture_async
from resultkit.result import Result, capture

__all__ = ['safe', 'safe_async']

type Decorator = Callable[[Callable[..., Any]], Callable[..., Any]]


def _name_of(wrapped: Any) -> str:
    return getattr(wrapped, '__name__', repr(wrapped))


@overload
def safe[**P, T](func: Callable[P, T], /) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe(
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[Any], Any] | None = None,
) -> Decorator: ...


def safe(
    func: Callable[..., Any] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[Any], Any] | None = None,
) -> Any:
    """Make a function return ``Success(value)`` or ``Failure(error)`` instead of raising.

    Usable bare (``@safe``) or configured (``@safe(exceptions=..., on_error=...)``).

    Args:
        func: The function to wrap, when used bare.
        exceptions: Exception types to capture. Defaults to ``(Exception,)``;
            anything else propagates.
        on_error: Maps a captured exception to the Failure's error. Without
            it the exception itself is stored.

    Returns:
        The wrapped function, or a decorator when called with options only.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return capture(
            lambda: wrapped(*args, **kwargs),
            catch=catch,
            on_error=on_error,
            event='safe captured exception',
            func=_name_of(wrapped),
        )

    return wrapper(func) if func is not None else wrapper


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]], /) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async(
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[Any], Any] | None = None,
) -> Decorator: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    /,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
    on_error: Callable[[Any], Any] | None = None,
) -> Any:
    """Async ``safe``: the wrapped coroutine function resolves to a Result.

    Takes the same options as ``safe``. Cancellation is a ``BaseException``
    and propagates unless it is listed in ``exceptions``.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        return await capture_async(
            lambda: wrapped(*args, **kwargs),
            catch=catch,
            on_error=on_error,
            event='safe_async captured exception',
            func=_name_of(wrapped),
        )

    return wrapper(func) if func is not None else wrapper
