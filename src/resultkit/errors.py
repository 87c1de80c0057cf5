"""Exceptions raised by resultkit itself.

Almost every operation in resultkit reports problems as a ``Failure``. The
classes here cover the few paths that deliberately leave Result-space:
``Result.match`` with no applicable pattern and ``Failure.get_or_throw`` on an
error value that is not an exception.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'FailureError',
    'MatchError',
    'ResultKitError',
]


class ResultKitError(Exception):
    """Base exception class for resultkit errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from resultkit import ResultKitError

        try:
            failure('boom').get_or_throw()
        except ResultKitError as e:
            print(f'resultkit error occurred: {e}')
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize a ResultKitError.

        Args:
            message (str): A human-readable description of the error.
            code (str | None): An optional error code for programmatic error handling.
        """
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class MatchError(ResultKitError):
    """No pattern passed to ``Result.match`` applied to the receiver."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='no_match')


class FailureError(ResultKitError):
    """Raised by ``get_or_throw`` when the stored error is not an exception.

    Exceptions stored in a ``Failure`` are re-raised as they are. Any other
    error value (a string, a dict, a struct) is carried on ``error`` unchanged.

    Attributes:
        error: The raw error value held by the Failure.
    """

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(str(error))

    def __str__(self) -> str:
        return self.message
