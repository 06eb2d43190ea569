"""Boundary checks for digit sequences."""

import logging
from typing import Optional, Sequence, Union

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

DIGIT_CHARS = frozenset("0123456789")


def normalize_digits(
    digits: Union[str, Sequence[str]], max_length: Optional[int] = None
) -> str:
    """Validate a digit sequence and return it as a string.

    Accepts a string or any ordered sequence of single-character strings.
    Only ASCII '0'-'9' are digits; whitespace is not stripped.

    Args:
        digits: Digit sequence to check
        max_length: Optional cap on the sequence length

    Returns:
        The digit sequence as a ``str``

    Raises:
        InvalidInputError: If the sequence is empty, contains a non-digit,
            or is longer than ``max_length``
    """
    if not isinstance(digits, str):
        chars = list(digits)
        for index, char in enumerate(chars):
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidInputError(
                    f"Expected single digit characters, got {char!r} at index {index}"
                )
        digits = "".join(chars)

    if not digits:
        raise InvalidInputError("Digit sequence is empty")

    for index, char in enumerate(digits):
        if char not in DIGIT_CHARS:
            raise InvalidInputError(
                f"Invalid character {char!r} at index {index}: "
                "expected a single sequence of digits unbroken by whitespace"
            )

    if max_length is not None and len(digits) > max_length:
        raise InvalidInputError(
            f"Digit sequence has {len(digits)} digits, more than the limit of {max_length}"
        )

    logger.debug("Accepted digit sequence of length %d", len(digits))
    return digits
