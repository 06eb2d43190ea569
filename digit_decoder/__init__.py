"""Digit decoder - every message a digit string can encode (1=a ... 26=z)."""

__version__ = "0.1.0"

from .config import Config, DecoderConfig, OutputConfig
from .errors import DecoderError, InvalidInputError
from .models import DecodedMessage, DecodingResult, Group
from .pipeline import DecodingPipeline
from .segmenter import Segmenter, count_decodings, decode_all, iter_decodings

__all__ = [
    "Config",
    "DecoderConfig",
    "OutputConfig",
    "DecoderError",
    "InvalidInputError",
    "DecodedMessage",
    "DecodingResult",
    "Group",
    "DecodingPipeline",
    "Segmenter",
    "count_decodings",
    "decode_all",
    "iter_decodings",
]
