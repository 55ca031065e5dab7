"""
Prebuilt steps for picking fields out of sequences and filtering on emptiness.

Both kinds return None where there is nothing to pass on, which stops the
pipeline.
"""

from typing import Any, Optional, Sequence, Sized


def field_first(fields: Sequence[Any]) -> Optional[Any]:
    return fields[0] if len(fields) else None

def field_last(fields: Sequence[Any]) -> Optional[Any]:
    return fields[-1] if len(fields) else None


def select_empty(item: Sized) -> Optional[Sized]:
    """Keep only empty items"""
    return item if len(item) == 0 else None

def reject_empty(item: Sized) -> Optional[Sized]:
    """Keep only non-empty items"""
    return None if len(item) == 0 else item
