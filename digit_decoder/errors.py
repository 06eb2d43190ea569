"""Exceptions raised by the decoder."""


class DecoderError(Exception):
    """Base class for decoder errors."""


class InvalidInputError(DecoderError, ValueError):
    """Raised when a digit sequence cannot be decoded.

    The input is rejected before any decoding work begins: it is empty,
    contains a character outside '0'-'9', or exceeds the configured
    maximum length.
    """
