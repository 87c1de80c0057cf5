"""Conditional and try/catch chains.

Both chains are short-lived objects created by a Result method and resolved
back into a Result:

- ``result.if_(pred).then(...).else_(...)`` branches on a predicate for side
  effects and hands back the original Result.
- ``result.try_(op).finally_(...).catch(handler)`` runs a raising operation
  and turns its outcome into a new Result.

Example:
    ```python
    (
        success('5')
        .try_(int)
        .catch(lambda e: f'parse failed: {e}')
        .map(lambda n: n * 2)
        .if_(lambda n: n > 5)
        .then(lambda n: print(f'{n} is large'))
        .else_(lambda x: print(f'{x} is small or failed'))
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from resultkit._logging import get_logger
from resultkit.result import Failure, Success, Tag

if TYPE_CHECKING:
    from resultkit.result import Result

__all__ = ['ConditionalChain', 'TryChain']

logger = get_logger(__name__)


class ConditionalChain[A, E]:
    """Branching state produced by ``Result.if_``.

    Holds the original Result and the predicate outcome. For a Failure the
    outcome is always False, so ``else_`` is the Failure's catch-all branch.

    Attributes:
        result: The Result the chain was created from.
        condition: The predicate outcome (always False for Failure).
    """

    __slots__ = ('condition', 'result')

    def __init__(self, result: Result[A, E], condition: bool) -> None:  # noqa: FBT001
        self.result = result
        self.condition = condition

    def then(self, callback: Callable[[A], Any]) -> ConditionalChain[A, E]:
        """Run ``callback(value)`` if the Result is Success and the condition held.

        Returns the same chain, so several ``then`` calls can be stacked.
        """
        if self.result.tag is Tag.SUCCESS and self.condition:
            callback(self.result.value)
        return self

    def else_(self, callback: Callable[[Any], Any]) -> Result[A, E]:
        """Run the fallback branch and end the chain.

        For Success with a false condition, ``callback`` receives the value.
        For Failure, ``callback`` always receives the error.

        Returns:
            The original Result, unchanged.
        """
        if self.result.tag is Tag.FAILURE:
            callback(self.result.error)
        elif not self.condition:
            callback(self.result.value)
        return self.result

    def __repr__(self) -> str:
        return f'ConditionalChain(result={self.result!r}, condition={self.condition!r})'


class TryChain[A, E, B]:
    """Pending outcome of ``Result.try_``.

    Holds the receiver together with either the operation's return value or
    the exception it raised. Resolve it with ``catch``.

    Note:
        Only exceptions raised while ``op`` runs are captured. An ``async def``
        operation returns a coroutine without raising, so the chain resolves
        to ``Success(<coroutine>)`` and anything the coroutine raises later is
        not caught. Bridge async code with ``from_awaitable`` instead.
    """

    __slots__ = ('_raised', '_returned', '_source')

    def __init__(self, source: Result[A, E], returned: B | None = None, raised: Exception | None = None) -> None:
        self._source = source
        self._returned = returned
        self._raised = raised

    @classmethod
    def run(cls, source: Success[A], op: Callable[[A], B]) -> TryChain[A, E, B]:
        """Run ``op`` on a Success value and record what happened."""
        try:
            returned = op(source.value)
        except Exception as e:  # noqa: BLE001
            logger.debug('try_ captured exception', exc_type=type(e).__name__)
            return cls(source, raised=e)
        return cls(source, returned=returned)

    @classmethod
    def skipped(cls, source: Failure[E]) -> TryChain[A, E, B]:
        """Build a chain for a Failure receiver; nothing was run."""
        return cls(source)

    def finally_(self, cleanup: Callable[[], Any]) -> TryChain[A, E, B]:
        """Run ``cleanup()`` for its side effect and return the same chain."""
        cleanup()
        return self

    def catch[F](self, handler: Callable[[Any], F]) -> Result[B, F]:
        """Resolve the chain into a Result.

        Args:
            handler: Maps the raised exception, or the receiver's original
                error when the receiver was a Failure, to the new error.

        Returns:
            ``success(return_value)`` if the operation completed, otherwise
            ``failure(handler(...))``.
        """
        if self._source.tag is Tag.FAILURE:
            return Failure(handler(self._source.error))
        if self._raised is not None:
            return Failure(handler(self._raised))
        return Success(self._returned)

    def __repr__(self) -> str:
        if self._raised is not None:
            return f'TryChain(raised={self._raised!r})'
        if self._source.tag is Tag.FAILURE:
            return f'TryChain(source={self._source!r})'
        return f'TryChain(returned={self._returned!r})'
