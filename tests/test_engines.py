"""
Tests for the partition engines.
"""

import pytest

from digit_decoder.engines import ENGINES, RecursiveEngine, TableEngine, get_engine
from digit_decoder.models import Group
from digit_decoder.utils import count_partitions


def as_groupings(partitions):
    return [" ".join(group.digits for group in partition) for partition in partitions]


@pytest.fixture(params=sorted(ENGINES))
def engine(request):
    return get_engine(request.param)


class TestPartitionEngines:
    """Behaviour shared by every engine."""

    def test_single_digit(self, engine):
        assert engine.partitions("7") == [(Group("7", 0),)]

    def test_four_digits(self, engine):
        assert as_groupings(engine.partitions("1234")) == [
            "1 2 3 4",
            "1 2 34",
            "1 23 4",
            "12 3 4",
            "12 34",
        ]

    @pytest.mark.parametrize("length", range(1, 13))
    def test_count_follows_recurrence(self, engine, length):
        digits = "9876543210123"[:length]
        partitions = engine.partitions(digits)

        assert len(partitions) == count_partitions(length)
        assert engine.count_partitions(digits) == count_partitions(length)

    def test_partitions_are_unique(self, engine):
        partitions = engine.partitions("12121212")
        assert len(set(partitions)) == len(partitions)

    def test_partitions_cover_input(self, engine):
        digits = "90817263"
        for partition in engine.iter_partitions(digits):
            assert "".join(group.digits for group in partition) == digits
            position = 0
            for group in partition:
                assert group.start_index == position
                assert group.size in (1, 2)
                position = group.end_index
            assert position == len(digits)

    def test_count_independent_of_digit_values(self, engine):
        assert len(engine.partitions("00000")) == len(engine.partitions("99999")) == 8

    def test_accept_prunes_branches(self, engine):
        def no_pairs(group):
            return group.size == 1

        assert as_groupings(engine.partitions("1234", accept=no_pairs)) == ["1 2 3 4"]

    def test_accept_can_reject_everything(self, engine):
        assert engine.partitions("12", accept=lambda group: False) == []


def test_engines_produce_same_order():
    """The lazy and table engines enumerate identically."""
    digits = "2611055971"
    assert RecursiveEngine().partitions(digits) == TableEngine().partitions(digits)


def test_recursive_engine_is_lazy():
    partitions = RecursiveEngine().iter_partitions("1" * 300)
    first = next(partitions)

    assert len(first) == 300
    assert all(group.size == 1 for group in first)


def test_recursive_engine_deep_sequence():
    """Thousands of digits are walked without nested calls."""
    partitions = RecursiveEngine().iter_partitions("1" * 3000)

    first = next(partitions)
    second = next(partitions)

    assert len(first) == 3000
    assert len(second) == 2999
    assert second[-1] == Group("11", 2998)


def test_table_engine_suffix_entries():
    table = TableEngine().build_table("12345")

    assert [len(entry) for entry in table] == [8, 5, 3, 2, 1, 1]
    assert table[5] == [()]
    assert as_groupings(table[3]) == ["4 5", "45"]


def test_get_engine():
    assert isinstance(get_engine("recursive"), RecursiveEngine)
    assert isinstance(get_engine("table"), TableEngine)
    with pytest.raises(ValueError):
        get_engine("greedy")


def test_group_properties():
    group = Group("05", 3)

    assert group.value == 5
    assert group.size == 2
    assert group.end_index == 5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
