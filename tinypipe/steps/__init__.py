"""
Prebuilt steps for common text processing.

These are plain functions; mix them freely with your own callables when
building a Pipeline.
"""

from .text import (
    strip,
    upcase,
    downcase,
    join,
    join_space,
    join_comma,
    join_tab,
    join_pipe,
    split_space,
    split_comma,
    split_tab,
    split_pipe,
    split_space_max,
)
from .fields import field_first, field_last, select_empty, reject_empty

__all__ = [
    "strip",
    "upcase",
    "downcase",
    "join",
    "join_space",
    "join_comma",
    "join_tab",
    "join_pipe",
    "split_space",
    "split_comma",
    "split_tab",
    "split_pipe",
    "split_space_max",
    "field_first",
    "field_last",
    "select_empty",
    "reject_empty",
]
