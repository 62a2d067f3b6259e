"""
Counter helpers shared by the accumulator and the reader's run bookkeeping.
"""
from typing import Mapping


def lookup(mapping: Mapping, key, default: int = 0):
    """Read a counter, treating an absent key as `default`."""
    if key in mapping:
        return mapping[key]
    return default


def bump(counter: dict, key, inc: int = 1) -> int:
    """Add `inc` to `counter[key]` (absent keys start at 0); returns the new value."""
    value = lookup(counter, key) + inc
    counter[key] = value
    return value
