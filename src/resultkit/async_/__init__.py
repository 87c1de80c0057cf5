"""Async bridge: bring awaitables into Result-space."""

from resultkit.async_.bridge import from_awaitable, from_awaitable_tuple

__all__ = [
    'from_awaitable',
    'from_awaitable_tuple',
]
