"""resultkit: Success/Failure Results for explicit error handling.

Immutable Result variants with chaining combinators, conditional and
try/catch chains, ordered pattern matching, Result-aware operators over
sequences and mappings, an async bridge, and pipeline composition.

Flat imports (preferred):
    from resultkit import Result, success, failure, try_catch, all_
    from resultkit import pipe, compose, curry, safe, from_awaitable

Submodule imports (for organization):
    from resultkit.result import Success, Failure, Result
    from resultkit.matching import on_success, on_success_if, on_failure
    from resultkit.arrays import map_, head
    from resultkit.objects import prop, get_path, clone
"""

# Async
from resultkit.async_ import from_awaitable, from_awaitable_tuple

# Chains
from resultkit.chains import ConditionalChain, TryChain

# Composition
from resultkit.compose import compose, compose_async, curry, pipe, pipe_async

# Configuration
from resultkit.config import Settings, configure, get_settings

# Decorators
from resultkit.decorators import safe, safe_async

# Errors
from resultkit.errors import FailureError, MatchError, ResultKitError

# Matching
from resultkit.matching import (
    Pattern,
    PatternKind,
    on_failure,
    on_success,
    on_success_if,
    on_success_like,
)
from resultkit.result import (
    Failure,
    Result,
    Success,
    Tag,
    all_,
    failure,
    is_result,
    success,
    try_catch,
)

__all__ = [
    'ConditionalChain',
    'Failure',
    'FailureError',
    'MatchError',
    'Pattern',
    'PatternKind',
    'Result',
    'ResultKitError',
    'Settings',
    'Success',
    'Tag',
    'TryChain',
    'all_',
    'compose',
    'compose_async',
    'configure',
    'curry',
    'failure',
    'from_awaitable',
    'from_awaitable_tuple',
    'get_settings',
    'is_result',
    'on_failure',
    'on_success',
    'on_success_if',
    'on_success_like',
    'pipe',
    'pipe_async',
    'safe',
    'safe_async',
    'success',
    'try_catch',
]

__version__ = '0.1.0'
