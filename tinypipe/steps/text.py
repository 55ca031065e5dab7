"""
Prebuilt text steps: trimming, case conversion, splitting and joining.
"""

from typing import Any, Callable, Iterable, Optional


def strip(line: str) -> str:
    return line.strip()

def upcase(line: str) -> str:
    return line.upper()

def downcase(line: str) -> str:
    return line.lower()


# Joining

def _join(parts: Iterable[Any], separator: str) -> str:
    return separator.join(str(p) for p in parts)

def join(parts: Iterable[Any]) -> str:
    return _join(parts, "")

def join_space(parts: Iterable[Any]) -> str:
    return _join(parts, " ")

def join_comma(parts: Iterable[Any]) -> str:
    return _join(parts, ",")

def join_tab(parts: Iterable[Any]) -> str:
    return _join(parts, "\t")

def join_pipe(parts: Iterable[Any]) -> str:
    return _join(parts, "|")


# Splitting

def _split(line: str, separator: str) -> list[str]:
    """Split on a literal separator, dropping trailing empty fields"""
    fields = line.split(separator)
    while fields and fields[-1] == "":
        fields.pop()
    return fields

def split_space(line: str) -> list[str]:
    """Split on runs of whitespace, ignoring leading and trailing whitespace"""
    return line.split()

def split_comma(line: str) -> list[str]:
    return _split(line, ",")

def split_tab(line: str) -> list[str]:
    return _split(line, "\t")

def split_pipe(line: str) -> list[str]:
    return _split(line, "|")

def split_space_max(fields: Optional[int] = None) -> Callable[[str], list[str]]:
    """
    Build a step splitting on whitespace into at most ``fields`` fields.
    
    The last field keeps the rest of the line, inner whitespace included.
    
    Args:
        fields: Maximum number of fields, None for no limit
        
    Returns:
        Step function
    """
    if fields is not None and fields < 1:
        raise ValueError(f"fields must be at least 1, got {fields}")
    maxsplit = -1 if fields is None else fields - 1
    
    def split_space_limited(line: str) -> list[str]:
        return line.split(None, maxsplit)
    
    split_space_limited.__name__ = f"split_space_max_{fields}"
    return split_space_limited
