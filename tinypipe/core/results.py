"""
Optional result types and errors for tinypipe.
Using the returns library to make the short-circuit path explicit.
"""

import functools
from typing import Any, Callable, Optional

from returns.maybe import Maybe, Some, Nothing

# Common error types for tinypipe
class TinyPipeError(Exception):
    """Base exception for all tinypipe errors"""
    pass

class ConfigurationError(TinyPipeError):
    """Configuration-related errors"""
    pass

# Adapters between Maybe-returning and None-returning steps

def from_maybe(step: Callable[[Any], Maybe[Any]]) -> Callable[[Any], Optional[Any]]:
    """
    Adapt a step returning a Maybe into one returning a value or None.
    
    Args:
        step: Callable returning Some(value) or Nothing
        
    Returns:
        Step usable inside a Pipeline
    """
    @functools.wraps(step)
    def wrapper(item: Any) -> Optional[Any]:
        return step(item).value_or(None)
    return wrapper

def to_maybe(step: Callable[[Any], Optional[Any]]) -> Callable[[Any], Maybe[Any]]:
    """
    Adapt a pipeline step into one returning a Maybe.
    
    Args:
        step: Callable returning a value or None
        
    Returns:
        Callable returning Some(value) or Nothing
    """
    @functools.wraps(step)
    def wrapper(item: Any) -> Maybe[Any]:
        return Maybe.from_optional(step(item))
    return wrapper

__all__ = [
    "Maybe",
    "Some",
    "Nothing",
    "TinyPipeError",
    "ConfigurationError",
    "from_maybe",
    "to_maybe",
]
