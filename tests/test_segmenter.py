"""
Tests for decoding digit sequences into messages.
"""

import pytest

from digit_decoder import (
    DecoderConfig,
    InvalidInputError,
    Segmenter,
    count_decodings,
    decode_all,
    iter_decodings,
)


class TestDecodeAll:
    """Decoding under the default strict zero policy."""

    def test_four_digits(self):
        """1 2 34 and 12 34 are dropped because 34 is out of range."""
        assert decode_all("1234") == ["abcd", "awd", "lcd"]

    def test_all_ones_yields_fibonacci_count(self):
        """Every grouping of 1s is valid, so P(5) = 8 messages."""
        messages = decode_all("11111")

        assert len(messages) == 8
        assert messages == ["aaaaa", "aaak", "aaka", "akaa", "akk", "kaaa", "kak", "kka"]
        assert all(set(message) <= {"a", "k"} for message in messages)

    def test_single_digit(self):
        assert decode_all("9") == ["i"]

    def test_pair_at_upper_bound(self):
        assert decode_all("226") == ["bbf", "bz", "vf"]
        assert decode_all("27") == ["bg"]

    def test_ten_and_twenty(self):
        assert decode_all("10") == ["j"]
        assert decode_all("20") == ["t"]

    def test_zero_groups_are_rejected(self):
        """Strict: "3 0" has a zero group and "30" is above 26."""
        assert decode_all("30") == []
        assert decode_all("0") == []
        assert decode_all("100") == []

    def test_leading_zero_pair_is_rejected(self):
        """"05" is never a valid group; only 10 5 survives."""
        assert decode_all("105") == ["je"]

    def test_every_message_has_one_letter_per_group(self):
        segmenter = Segmenter()
        for digits in ["1234", "11111", "2611", "1019"]:
            for message in segmenter.iter_messages(digits):
                assert len(message.text) == message.num_groups

    def test_character_sequence_input(self):
        assert decode_all(["1", "2"]) == ["ab", "l"]
        assert decode_all(("2", "6")) == ["bf", "z"]


class TestEmptyZeroPolicy:
    """Decoding when "0" and "00" translate to nothing."""

    def test_thirty(self):
        assert decode_all("30", zero_policy="empty") == ["c"]

    def test_ten(self):
        assert decode_all("10", zero_policy="empty") == ["a", "j"]

    def test_duplicate_messages_are_kept(self):
        """1 0 0 and 1 00 both read "a"; messages are not deduplicated."""
        assert decode_all("100", zero_policy="empty") == ["a", "a", "j"]

    def test_leading_zero_pair_stays_invalid(self):
        assert decode_all("105", zero_policy="empty") == ["ae", "je"]

    def test_lone_zero_decodes_to_empty_message(self):
        assert decode_all("0", zero_policy="empty") == [""]

    def test_message_length_excludes_zero_groups(self):
        segmenter = Segmenter(DecoderConfig(zero_policy="empty"))
        for digits in ["1020", "3004", "100", "90"]:
            for message in segmenter.iter_messages(digits):
                zero_groups = sum(1 for group in message.partition if group.value == 0)
                assert len(message.text) == message.num_groups - zero_groups


class TestInvalidInput:
    """Input is rejected before any decoding work."""

    @pytest.mark.parametrize("digits", ["", "12a3", "1 2", " 12", "12\n", "-1", "1.5", "١٢"])
    def test_rejected_strings(self, digits):
        with pytest.raises(InvalidInputError):
            decode_all(digits)

    def test_empty_sequence(self):
        with pytest.raises(InvalidInputError):
            decode_all([])

    def test_non_character_elements(self):
        with pytest.raises(InvalidInputError):
            decode_all([1, 2])
        with pytest.raises(InvalidInputError):
            decode_all(["12", "3"])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            decode_all("abc")

    def test_error_names_position(self):
        with pytest.raises(InvalidInputError, match="index 2"):
            decode_all("12a3")

    def test_max_length(self):
        segmenter = Segmenter(DecoderConfig(max_length=3))

        assert segmenter.decode_all("123") == ["abc", "aw", "lc"]
        with pytest.raises(InvalidInputError):
            segmenter.decode_all("1234")

    def test_lazy_mode_raises_before_iteration(self):
        with pytest.raises(InvalidInputError):
            iter_decodings("")
        with pytest.raises(InvalidInputError):
            Segmenter().iter_partitions("x")


class TestSegmenter:
    """Engine choice, pruning, limits and counting."""

    INPUTS = ["1", "1234", "11111", "226", "1020", "30", "100", "2611055971756562", "0000"]

    @pytest.mark.parametrize("zero_policy", ["strict", "empty"])
    def test_engines_agree(self, zero_policy):
        recursive = Segmenter(DecoderConfig(engine="recursive", zero_policy=zero_policy))
        table = Segmenter(DecoderConfig(engine="table", zero_policy=zero_policy))
        for digits in self.INPUTS:
            assert recursive.decode_all(digits) == table.decode_all(digits)

    @pytest.mark.parametrize("engine", ["recursive", "table"])
    @pytest.mark.parametrize("zero_policy", ["strict", "empty"])
    def test_pruning_does_not_change_results(self, engine, zero_policy):
        pruned = Segmenter(DecoderConfig(engine=engine, zero_policy=zero_policy, prune=True))
        unpruned = Segmenter(DecoderConfig(engine=engine, zero_policy=zero_policy, prune=False))
        for digits in self.INPUTS:
            assert pruned.decode_all(digits) == unpruned.decode_all(digits)

    @pytest.mark.parametrize("zero_policy", ["strict", "empty"])
    def test_count_matches_decode(self, zero_policy):
        segmenter = Segmenter(DecoderConfig(zero_policy=zero_policy))
        for digits in self.INPUTS:
            assert segmenter.count(digits) == len(segmenter.decode_all(digits))

    def test_count_long_sequence(self):
        """Counting does not enumerate: 80 ones have Fib(81) decodings."""
        assert count_decodings("1" * 80) == 37889062373143906
        assert count_decodings("30" * 40) == 0

    def test_decode_result(self):
        result = Segmenter().decode("1234")

        assert result.digits == "1234"
        assert result.partition_count == 5
        assert result.texts == ["abcd", "awd", "lcd"]
        assert [message.grouping for message in result.messages] == [
            "1 2 3 4",
            "1 23 4",
            "12 3 4",
        ]
        assert result.truncated is False

    def test_max_messages(self):
        segmenter = Segmenter(DecoderConfig(max_messages=3))

        result = segmenter.decode("11111")
        assert result.texts == ["aaaaa", "aaak", "aaka"]
        assert result.truncated is True

        result = segmenter.decode("1234")
        assert len(result.messages) == 3
        assert result.truncated is False

    def test_lazy_mode_on_long_input(self):
        """The first message of a long sequence arrives without enumerating the rest."""
        decodings = iter_decodings("1" * 200)
        assert next(decodings) == "a" * 200
        assert next(decodings) == "a" * 198 + "k"

    @pytest.mark.parametrize("engine", ["recursive", "table"])
    def test_long_sequence_with_single_decoding(self, engine):
        """Sequence length is not bounded by the recursion limit."""
        segmenter = Segmenter(DecoderConfig(engine=engine))

        assert segmenter.decode_all("27" * 600) == ["bg" * 600]
        assert segmenter.count("27" * 600) == 1

    def test_partitions_cover_input(self):
        for partition in Segmenter().iter_partitions("2611055971756562"):
            assert "".join(group.digits for group in partition) == "2611055971756562"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
