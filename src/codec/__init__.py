"""
Codec — внешние представления целых чисел

Конверсия между SignedInteger и десятичной строкой, int Python,
numpy целыми фиксированной ширины и записью int_base10.
"""

from src.codec.codec import (
    Encoding,
    decode,
    detect_encoding,
    encode,
    from_int,
    from_native,
    from_record,
    parse_text,
    to_int,
    to_native,
    to_record,
    to_text,
)
from src.codec.config import DEFAULT_CODEC_CONFIG, CodecConfig

__all__ = [
    # Types
    "Encoding",
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    # Detection
    "detect_encoding",
    # Decoders
    "decode",
    "parse_text",
    "from_int",
    "from_native",
    "from_record",
    # Encoders
    "encode",
    "to_text",
    "to_int",
    "to_native",
    "to_record",
]
