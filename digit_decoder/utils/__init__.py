"""Utility functions."""

from .counting import count_partitions, count_valid_partitions
from .input_normalizer import normalize_digits
from .translation import LETTER_TABLE, translate_group, translate_partition
from .validation import (
    ZERO_POLICIES,
    filter_valid_partitions,
    group_accepter,
    is_valid_group,
    is_valid_partition,
)

__all__ = [
    "count_partitions",
    "count_valid_partitions",
    "normalize_digits",
    "LETTER_TABLE",
    "translate_group",
    "translate_partition",
    "ZERO_POLICIES",
    "filter_valid_partitions",
    "group_accepter",
    "is_valid_group",
    "is_valid_partition",
]
