"""Group and partition validity under a zero-handling policy.

Two policies are supported:

- ``strict``: a group is valid iff it has no leading zero and its value
  lies in [1, 26]. "0", "00" and "05" are all invalid.
- ``empty``: "0" and "00" are valid zero-width groups that translate to
  nothing. Every other group follows the strict rule, so "05" stays
  invalid.
"""

from typing import Iterable, Iterator, Literal

from ..models import Group, Partition

ZeroPolicy = Literal["strict", "empty"]
ZERO_POLICIES = ("strict", "empty")

MIN_GROUP_VALUE = 1
MAX_GROUP_VALUE = 26

ZERO_GROUPS = frozenset({"0", "00"})


def check_zero_policy(zero_policy: str) -> None:
    """Raise ValueError for an unknown zero policy."""
    if zero_policy not in ZERO_POLICIES:
        raise ValueError(
            f"Unknown zero policy {zero_policy!r} (expected one of {ZERO_POLICIES})"
        )


def is_valid_group(digits: str, zero_policy: ZeroPolicy = "strict") -> bool:
    """Check whether a single group can be translated.

    Args:
        digits: Digits of the group (one or two characters)
        zero_policy: "strict" or "empty"

    Returns:
        True if the group is valid under the policy
    """
    check_zero_policy(zero_policy)
    if zero_policy == "empty" and digits in ZERO_GROUPS:
        return True
    if digits.startswith("0"):
        return False
    return MIN_GROUP_VALUE <= int(digits) <= MAX_GROUP_VALUE


def is_valid_partition(partition: Partition, zero_policy: ZeroPolicy = "strict") -> bool:
    """Check that every group of the partition is valid."""
    return all(is_valid_group(group.digits, zero_policy) for group in partition)


def filter_valid_partitions(
    partitions: Iterable[Partition], zero_policy: ZeroPolicy = "strict"
) -> Iterator[Partition]:
    """Lazily drop partitions containing an invalid group."""
    check_zero_policy(zero_policy)
    for partition in partitions:
        if is_valid_partition(partition, zero_policy):
            yield partition


def group_accepter(zero_policy: ZeroPolicy = "strict"):
    """Build a ``Group`` predicate for pruning enumeration branches."""
    check_zero_policy(zero_policy)

    def accept(group: Group) -> bool:
        return is_valid_group(group.digits, zero_policy)

    return accept
