"""Base class and constants for partition engines."""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional

from ..models import Group, Partition
from ..utils.counting import count_partitions

# Groups are one or two adjacent digits, never more
MAX_GROUP_SIZE = 2

GroupFilter = Callable[[Group], bool]


class PartitionEngine(ABC):
    """Base class for partition engines.

    An engine enumerates every way to split a digit sequence into
    contiguous groups of size 1 or 2, left to right. Each partition is
    produced exactly once, single-digit branches before pair branches.
    """

    name = "base"

    @abstractmethod
    def iter_partitions(
        self, digits: str, accept: Optional[GroupFilter] = None
    ) -> Iterator[Partition]:
        """Enumerate the partitions of a digit sequence.

        Args:
            digits: Validated, non-empty digit sequence
            accept: Optional predicate; branches starting with a group it
                rejects are not extended

        Returns:
            Iterator over partitions (tuples of groups)
        """
        pass

    def partitions(
        self, digits: str, accept: Optional[GroupFilter] = None
    ) -> list[Partition]:
        """Materialize every partition of ``digits``."""
        return list(self.iter_partitions(digits, accept))

    def count_partitions(self, digits: str) -> int:
        """Number of candidate partitions of ``digits``."""
        return count_partitions(len(digits))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
