"""Decode digit sequences into every plausible message.

The Segmenter composes three steps, left to right:

1. partition enumeration (an engine from ``digit_decoder.engines``),
2. validation of every group against [1, 26] under the zero policy,
3. translation of each surviving partition through the letter table.

Input is checked once, at the boundary. Everything after that is total.
"""

import logging
from itertools import islice
from typing import Iterator, Optional, Sequence, Union

from .config import DecoderConfig
from .engines import get_engine
from .models import DecodedMessage, DecodingResult, Partition
from .utils import (
    count_partitions,
    count_valid_partitions,
    filter_valid_partitions,
    group_accepter,
    is_valid_group,
    normalize_digits,
    translate_partition,
)

logger = logging.getLogger(__name__)

Digits = Union[str, Sequence[str]]


class Segmenter:
    """Enumerate, validate and translate the partitions of a digit sequence."""

    def __init__(self, config: Optional[DecoderConfig] = None):
        """Initialize the segmenter.

        Args:
            config: Decoder configuration (defaults to DecoderConfig())
        """
        self.config = config or DecoderConfig()
        self.engine = get_engine(self.config.engine)
        self.zero_policy = self.config.zero_policy

    def normalize(self, digits: Digits) -> str:
        """Check ``digits`` at the boundary and return it as a string."""
        return normalize_digits(digits, max_length=self.config.max_length)

    def iter_partitions(self, digits: Digits) -> Iterator[Partition]:
        """Lazily yield the valid partitions of ``digits``.

        Raises:
            InvalidInputError: Before iteration starts, for bad input
        """
        digits = self.normalize(digits)
        return self._valid_partitions(digits)

    def _valid_partitions(self, digits: str) -> Iterator[Partition]:
        accept = group_accepter(self.zero_policy) if self.config.prune else None
        candidates = self.engine.iter_partitions(digits, accept)
        return filter_valid_partitions(candidates, self.zero_policy)

    def iter_messages(self, digits: Digits) -> Iterator[DecodedMessage]:
        """Lazily yield a decoded message per valid partition.

        Raises:
            InvalidInputError: Before iteration starts, for bad input
        """
        digits = self.normalize(digits)
        return self._messages(digits)

    def _messages(self, digits: str) -> Iterator[DecodedMessage]:
        for partition in self._valid_partitions(digits):
            yield DecodedMessage(
                text=translate_partition(partition, self.zero_policy),
                partition=partition,
            )

    def decode(self, digits: Digits) -> DecodingResult:
        """Decode ``digits`` into a DecodingResult.

        Honors ``max_messages``: when set, at most that many messages are
        produced and ``truncated`` reports whether more were available.
        """
        digits = self.normalize(digits)
        limit = self.config.max_messages
        messages = self._messages(digits)
        if limit is None:
            collected = list(messages)
            truncated = False
        else:
            collected = list(islice(messages, limit + 1))
            truncated = len(collected) > limit
            collected = collected[:limit]

        logger.debug(
            "Decoded %s: %d messages (%s engine, %s zero policy)",
            digits,
            len(collected),
            self.engine.name,
            self.zero_policy,
        )
        return DecodingResult(
            digits=digits,
            messages=collected,
            partition_count=count_partitions(len(digits)),
            truncated=truncated,
        )

    def decode_all(self, digits: Digits) -> list[str]:
        """Return every decoded message for ``digits``."""
        return self.decode(digits).texts

    def count(self, digits: Digits) -> int:
        """Count the decoded messages without producing them."""
        digits = self.normalize(digits)
        return count_valid_partitions(
            digits, lambda chunk: is_valid_group(chunk, self.zero_policy)
        )


def decode_all(digits: Digits, zero_policy: str = "strict") -> list[str]:
    """Decode a digit sequence into every plausible message.

    Args:
        digits: String (or sequence of characters) of digits '0'-'9'
        zero_policy: "strict" or "empty"

    Returns:
        One message per valid partition, single-digit groupings first

    Raises:
        InvalidInputError: If ``digits`` is empty or holds a non-digit
    """
    return Segmenter(DecoderConfig(zero_policy=zero_policy)).decode_all(digits)


def iter_decodings(digits: Digits, zero_policy: str = "strict") -> Iterator[str]:
    """Lazy counterpart of decode_all; input is checked before returning."""
    messages = Segmenter(DecoderConfig(zero_policy=zero_policy)).iter_messages(digits)
    return (message.text for message in messages)


def count_decodings(digits: Digits, zero_policy: str = "strict") -> int:
    """Number of messages decode_all would return, computed in linear time."""
    return Segmenter(DecoderConfig(zero_policy=zero_policy)).count(digits)
