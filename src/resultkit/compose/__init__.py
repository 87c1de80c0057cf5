"""Composition utilities: Result pipelines and curry()."""

from resultkit.compose.curry import curry
from resultkit.compose.pipe import compose, compose_async, pipe, pipe_async

__all__ = [
    'compose',
    'compose_async',
    'curry',
    'pipe',
    'pipe_async',
]
