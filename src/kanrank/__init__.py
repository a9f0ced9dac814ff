"""Fractional rank keys for ordering kanban columns and cards."""

from kanrank.rank import (
    ALPHABET,
    FIRST_KEY,
    InvalidArgumentError,
    InvalidRangeError,
    RankError,
    evenly_spaced_keys,
    key_after,
    key_before,
    key_between,
)

__all__ = [
    "ALPHABET",
    "FIRST_KEY",
    "InvalidArgumentError",
    "InvalidRangeError",
    "RankError",
    "evenly_spaced_keys",
    "key_after",
    "key_before",
    "key_between",
]
