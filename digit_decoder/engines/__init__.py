"""Partition engines."""

from .base import MAX_GROUP_SIZE, PartitionEngine
from .recursive_engine import RecursiveEngine
from .table_engine import TableEngine

ENGINES = {
    RecursiveEngine.name: RecursiveEngine,
    TableEngine.name: TableEngine,
}


def get_engine(name: str) -> PartitionEngine:
    """Instantiate an engine by name."""
    try:
        return ENGINES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown engine {name!r} (expected one of {sorted(ENGINES)})"
        ) from None


__all__ = [
    "MAX_GROUP_SIZE",
    "PartitionEngine",
    "RecursiveEngine",
    "TableEngine",
    "ENGINES",
    "get_engine",
]
