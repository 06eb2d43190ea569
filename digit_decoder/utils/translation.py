"""Translate digit groups to letters."""

import string
from types import MappingProxyType

from ..models import Partition
from .validation import ZERO_GROUPS, ZeroPolicy, check_zero_policy

# 1 -> "a" ... 26 -> "z"
LETTER_TABLE = MappingProxyType(
    {value: letter for value, letter in enumerate(string.ascii_lowercase, 1)}
)


def translate_group(digits: str, zero_policy: ZeroPolicy = "strict") -> str:
    """Translate the digits of one group.

    Args:
        digits: Digits of a validated group
        zero_policy: "strict" or "empty"

    Returns:
        The letter for the group, or "" for a zero group under "empty"

    Raises:
        ValueError: If the group has no translation under the policy
    """
    check_zero_policy(zero_policy)
    if zero_policy == "empty" and digits in ZERO_GROUPS:
        return ""
    if not digits.startswith("0"):
        letter = LETTER_TABLE.get(int(digits))
        if letter is not None:
            return letter
    raise ValueError(f"No translation for group {digits!r} under {zero_policy!r} policy")


def translate_partition(partition: Partition, zero_policy: ZeroPolicy = "strict") -> str:
    """Concatenate the translations of every group in order."""
    return "".join(translate_group(group.digits, zero_policy) for group in partition)
