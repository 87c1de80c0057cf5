"""Result type: Success[A] | Failure[E] for explicit error handling.

A Result is always exactly one of two immutable variants. ``Success`` holds a
``value`` and has no ``error`` attribute; ``Failure`` holds an ``error`` and has
no ``value`` attribute. Every combinator returns a Result (or, for the
eliminators, a plain value) and never mutates its receiver.

Example:
    ```python
    from resultkit import success, failure

    parsed = success('21').map(int).map(lambda n: n * 2)
    print(parsed)  # Success(value=42)

    value, error = failure('bad input').map(int).unwrap()
    print(value, error)  # None bad input
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any, Never, NoReturn, TypeIs

import msgspec

from resultkit._logging import get_logger
from resultkit.errors import FailureError

if TYPE_CHECKING:
    from resultkit.chains import ConditionalChain, TryChain
    from resultkit.matching import Pattern

__all__ = [
    'Failure',
    'Result',
    'Success',
    'Tag',
    'all_',
    'capture',
    'failure',
    'is_result',
    'success',
    'try_catch',
]

logger = get_logger(__name__)


class Tag(Enum):
    """Discriminant carried by every Result variant."""

    SUCCESS = 'success'
    FAILURE = 'failure'


class Success[A](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type A.

    Examples:
        >>> ok = Success(42)
        >>> ok.get_or_throw()
        42
        >>> ok.map(lambda x: x * 2)
        Success(value=84)
    """

    value: A

    tag = Tag.SUCCESS

    def __bool__(self) -> Never:
        raise TypeError('Result has no truth value; use .is_success() / .is_failure().')

    def is_success(self) -> TypeIs[Success[A]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[Any]]:
        """Return False since this is Success."""
        return False

    def map[B](self, f: Callable[[A], B]) -> Success[B]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            A new Success containing ``f(value)``.
        """
        return Success(f(self.value))

    def flat_map[B, E](self, f: Callable[[A], Result[B, E]]) -> Result[B, E]:
        """Apply a Result-returning function to the contained value.

        Also known as bind. The Result returned by ``f`` is returned as-is.
        """
        return f(self.value)

    def map_error(self, _f: Callable[[Any], Any]) -> Success[A]:
        """Return self unchanged since this is Success."""
        return self

    def recover(self, _f: Callable[[Any], Any]) -> Success[A]:
        """Return self unchanged since there is no error to recover from."""
        return self

    def fold[B](self, _on_failure: Callable[[Any], B], on_success: Callable[[A], B]) -> B:
        """Apply ``on_success`` to the value and return its result."""
        return on_success(self.value)

    def get_or_else(self, _default: Any) -> A:
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_throw(self) -> A:
        """Return the contained value. Never raises for Success."""
        return self.value

    def unwrap(self) -> tuple[A, None]:
        """Destructure into ``(value, None)``.

        Example:
            ```python
            value, error = success(42).unwrap()
            # value == 42, error is None
            ```
        """
        return (self.value, None)

    def tap(self, f: Callable[[A], Any]) -> Success[A]:
        """Call ``f`` with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_error(self, _f: Callable[[Any], Any]) -> Success[A]:
        """Return self unchanged since this is Success."""
        return self

    def if_(self, predicate: Callable[[A], Any]) -> ConditionalChain[A, Any]:
        """Start a conditional chain, evaluating ``predicate`` against the value."""
        from resultkit.chains import ConditionalChain

        return ConditionalChain(self, bool(predicate(self.value)))

    def try_[B](self, op: Callable[[A], B]) -> TryChain[A, Any, B]:
        """Run ``op`` on the value, capturing anything it raises.

        The chain must be resolved with ``.catch(handler)``.
        """
        from resultkit.chains import TryChain

        return TryChain.run(self, op)

    def match(self, patterns: Iterable[Pattern]) -> Result[Any, Any]:
        """Dispatch on the first applicable pattern, in order.

        Raises:
            MatchError: If no success pattern applies.
        """
        from resultkit.matching import match_patterns

        return match_patterns(self, patterns)

    def match_simple[B](
        self,
        on_success: Callable[[A], B] | None = None,
        on_failure: Callable[[Any], B] | None = None,  # noqa: ARG002
    ) -> B | None:
        """Call ``on_success`` with the value, or return None if it was omitted."""
        if on_success is None:
            return None
        return on_success(self.value)


class Failure[E](msgspec.Struct, frozen=True):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> err = Failure('something went wrong')
        >>> err.is_failure()
        True
        >>> err.get_or_else(0)
        0
    """

    error: E

    tag = Tag.FAILURE

    def __bool__(self) -> Never:
        raise TypeError('Result has no truth value; use .is_success() / .is_failure().')

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure."""
        return True

    def map(self, _f: Callable[[Any], Any]) -> Failure[E]:
        """Return self unchanged; ``_f`` is never called."""
        return self

    def flat_map(self, _f: Callable[[Any], Result[Any, Any]]) -> Failure[E]:
        """Return self unchanged; ``_f`` is never called."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            A new Failure containing ``f(error)``.
        """
        return Failure(f(self.error))

    def recover[A](self, f: Callable[[E], A]) -> Success[A]:
        """Turn this Failure into a Success holding ``f(error)``."""
        return Success(f(self.error))

    def fold[B](self, on_failure: Callable[[E], B], _on_success: Callable[[Any], B]) -> B:
        """Apply ``on_failure`` to the error and return its result."""
        return on_failure(self.error)

    def get_or_else[A](self, default: A) -> A:
        """Return the default value since this is Failure."""
        return default

    def get_or_throw(self) -> NoReturn:
        """Raise the stored error.

        Exceptions are re-raised as they are. Any other error value is raised
        wrapped in ``FailureError``, which keeps the raw value on ``.error``.

        Raises:
            BaseException: The stored exception.
            FailureError: When the stored error is not an exception.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise FailureError(self.error)

    def unwrap(self) -> tuple[None, E]:
        """Destructure into ``(None, error)``."""
        return (None, self.error)

    def tap(self, _f: Callable[[Any], Any]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def tap_error(self, f: Callable[[E], Any]) -> Failure[E]:
        """Call ``f`` with the error for its side effect and return self."""
        f(self.error)
        return self

    def if_(self, _predicate: Callable[[Any], Any]) -> ConditionalChain[Any, E]:
        """Start a conditional chain; the predicate is never evaluated for Failure."""
        from resultkit.chains import ConditionalChain

        return ConditionalChain(self, False)

    def try_(self, _op: Callable[[Any], Any]) -> TryChain[Any, E, Any]:
        """Skip ``_op``; the chain hands the error straight to ``.catch``."""
        from resultkit.chains import TryChain

        return TryChain.skipped(self)

    def match(self, patterns: Iterable[Pattern]) -> Result[Any, Any]:
        """Dispatch on the first failure pattern.

        Raises:
            MatchError: If no failure pattern is given.
        """
        from resultkit.matching import match_patterns

        return match_patterns(self, patterns)

    def match_simple[B](
        self,
        on_success: Callable[[Any], B] | None = None,  # noqa: ARG002
        on_failure: Callable[[E], B] | None = None,
    ) -> B | None:
        """Call ``on_failure`` with the error, or return None if it was omitted."""
        if on_failure is None:
            return None
        return on_failure(self.error)


type Result[A, E = Any] = Success[A] | Failure[E]


def success[A](value: A) -> Success[A]:
    """Create a successful Result containing ``value``."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create a failed Result containing ``error``."""
    return Failure(error)


def is_result(value: object) -> TypeIs[Success[Any] | Failure[Any]]:
    """Check if a value is already a Result."""
    return isinstance(value, Success | Failure)


def try_catch[A, E](f: Callable[[], A], on_error: Callable[[Exception], E]) -> Result[A, E]:
    """Run a function that might raise and capture the outcome as a Result.

    Args:
        f: Zero-argument function to run.
        on_error: Maps the raised exception to the Failure's error value.

    Returns:
        ``success(f())``, or ``failure(on_error(exc))`` if ``f`` raised.

    Example:
        ```python
        try_catch(lambda: int('42'), str)
        # Success(value=42)
        try_catch(lambda: int('x'), lambda e: f'bad: {e}')
        # Failure(error="bad: invalid literal for int() with base 10: 'x'")
        ```
    """
    return capture(f, on_error=on_error, event='try_catch captured exception')


def capture[A](
    call: Callable[[], A],
    *,
    catch: tuple[type[BaseException], ...] = (Exception,),
    on_error: Callable[[Any], Any] | None = None,
    event: str = 'captured exception',
    **context: Any,
) -> Result[A, Any]:
    """Run ``call`` and turn an exception listed in ``catch`` into a Failure.

    This is the single capture path behind ``try_catch`` and ``@safe``. The
    Failure holds ``on_error(exc)``, or the exception itself when no mapper
    is given. Each capture is logged at debug level under ``event`` with
    ``context`` attached.
    """
    try:
        value = call()
    except catch as e:
        logger.debug(event, exc_type=type(e).__name__, **context)
        return Failure(on_error(e) if on_error is not None else e)
    return Success(value)


def all_[A, E](results: Iterable[Result[A, E]]) -> Result[list[A], E]:
    """Combine Results into one Result holding a list of values.

    Short-circuits on the first Failure encountered; iteration stops there.

    Examples:
        >>> all_([success(1), success(2)])
        Success(value=[1, 2])
        >>> all_([success(1), failure('fail'), success(3)])
        Failure(error='fail')
        >>> all_([])
        Success(value=[])
    """
    values: list[A] = []
    for result in results:
        if result.tag is Tag.FAILURE:
            return result
        values.append(result.value)
    return Success(values)
