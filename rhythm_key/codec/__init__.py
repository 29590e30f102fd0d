"""Token codec for rhythm-keys."""

from rhythm_key.codec.encoder import (
    display_rhythm_key,
    encode_fields,
    encode_rhythm_key,
)
from rhythm_key.codec.parser import parse_rhythm_key

__all__ = [
    "display_rhythm_key",
    "encode_fields",
    "encode_rhythm_key",
    "parse_rhythm_key",
]
