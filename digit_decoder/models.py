"""Data models for the decoder."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Group:
    """A contiguous run of one or two digits treated as one encoded unit."""

    digits: str
    start_index: int

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.digits)

    @property
    def size(self) -> int:
        return len(self.digits)

    @property
    def value(self) -> int:
        """Integer value of the group in base 10 ("05" -> 5)."""
        return int(self.digits)


# An ordered, gapless covering of the digit sequence
Partition = tuple[Group, ...]


@dataclass
class DecodedMessage:
    """A message produced from one valid partition."""

    text: str
    partition: Partition

    @property
    def grouping(self) -> str:
        """Space separated group digits, e.g. "1 23 4"."""
        return " ".join(group.digits for group in self.partition)

    @property
    def num_groups(self) -> int:
        return len(self.partition)


@dataclass
class DecodingResult:
    """Result of decoding one digit sequence."""

    digits: str
    messages: list[DecodedMessage] = field(default_factory=list)
    partition_count: int = 0  # Candidate partitions before validation
    truncated: bool = False  # True when max_messages cut the output short

    @property
    def texts(self) -> list[str]:
        return [message.text for message in self.messages]
