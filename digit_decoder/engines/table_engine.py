"""Dynamic-programming engine that builds partitions suffix by suffix."""

import logging
from typing import Iterator, Optional

from ..models import Group, Partition
from .base import MAX_GROUP_SIZE, GroupFilter, PartitionEngine

logger = logging.getLogger(__name__)


class TableEngine(PartitionEngine):
    """Fill a table of suffix partitions from right to left.

    table[i] holds every partition of digits[i:], with table[n] being the
    single empty partition. Each suffix is computed once and shared by
    both of its predecessors. The whole result set is kept in memory.
    """

    name = "table"

    def iter_partitions(
        self, digits: str, accept: Optional[GroupFilter] = None
    ) -> Iterator[Partition]:
        return iter(self.build_table(digits, accept)[0])

    def build_table(
        self, digits: str, accept: Optional[GroupFilter] = None
    ) -> list[list[Partition]]:
        """Build the suffix table for ``digits``.

        Args:
            digits: Validated digit sequence
            accept: Optional group predicate used to prune entries

        Returns:
            List of length n + 1 where entry i holds the partitions of
            the suffix starting at i
        """
        n = len(digits)
        table: list[list[Partition]] = [[] for _ in range(n + 1)]
        table[n] = [()]

        for start in range(n - 1, -1, -1):
            entry = []
            for size in range(1, MAX_GROUP_SIZE + 1):
                end = start + size
                if end > n:
                    break
                group = Group(digits[start:end], start)
                if accept is not None and not accept(group):
                    continue
                entry.extend((group,) + rest for rest in table[end])
            table[start] = entry

        logger.debug("Built suffix table for %d digits: %d partitions", n, len(table[0]))
        return table
