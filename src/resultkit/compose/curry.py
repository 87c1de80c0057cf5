"""curry(): collect positional arguments across calls."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['curry']

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _required_positional(fn: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Return a curried version of ``fn``.

    Calls accumulate positional arguments until ``arity`` of them have been
    given, then ``fn`` runs with all of them. Each call may pass several
    arguments at once. Keyword arguments are accumulated too and forwarded on
    the final call.

    Args:
        fn: Function to curry.
        arity: Number of positional arguments to wait for. Defaults to the
            number of required positional parameters in ``fn``'s signature;
            functions without an inspectable signature are called right away.

    Example:
        ```python
        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3)  # 6
        add3(1, 2)(3)  # 6
        add3(1)(2, 3)  # 6
        ```
    """
    needed = _required_positional(fn) if arity is None else arity
    if needed < 0:
        msg = f'arity must be >= 0, got {needed}'
        raise ValueError(msg)

    def collect(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        def curried(*more_args: Any, **more_kwargs: Any) -> Any:
            all_args = args + more_args
            all_kwargs = {**kwargs, **more_kwargs}
            if len(all_args) >= needed:
                return fn(*all_args, **all_kwargs)
            return collect(all_args, all_kwargs)

        return curried

    return collect((), {})
