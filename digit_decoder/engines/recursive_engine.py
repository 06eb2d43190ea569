"""Lazy engine walking the suffix recursion depth-first with an explicit stack."""

from typing import Iterator, Optional

from ..models import Group, Partition
from .base import MAX_GROUP_SIZE, GroupFilter, PartitionEngine

# A partial partition as a chain of (last group, rest of chain); None is empty
_Chain = Optional[tuple[Group, "_Chain"]]


def _unwind(chain: _Chain) -> Partition:
    groups = []
    while chain is not None:
        group, chain = chain
        groups.append(group)
    groups.reverse()
    return tuple(groups)


class RecursiveEngine(PartitionEngine):
    """Produce partitions one at a time without materializing the set.

    partitions(i) is the single empty partition when i == n, otherwise the
    group starting at i (one or two digits) followed by every partition of
    the remaining suffix. The recursion is unrolled onto a stack, so the
    sequence length is not bounded by the interpreter's recursion limit.
    """

    name = "recursive"

    def iter_partitions(
        self, digits: str, accept: Optional[GroupFilter] = None
    ) -> Iterator[Partition]:
        return self._walk(digits, accept)

    def _walk(self, digits: str, accept: Optional[GroupFilter]) -> Iterator[Partition]:
        n = len(digits)
        stack: list[tuple[int, _Chain]] = [(0, None)]

        while stack:
            start, chain = stack.pop()
            if start == n:
                yield _unwind(chain)
                continue

            # Push the pair branch first so the single-digit branch is visited first
            for size in range(MAX_GROUP_SIZE, 0, -1):
                end = start + size
                if end > n:
                    continue
                group = Group(digits[start:end], start)
                if accept is not None and not accept(group):
                    continue
                stack.append((end, (group, chain)))
