"""Quantized digests of rhythm-keys."""

from rhythm_key.digest.engine import DIGEST_HEX_LENGTH, digest_rhythm_key
from rhythm_key.digest.quantize import (
    check_bucket_width,
    quantize_rhythm_key,
    quantize_timings,
)

__all__ = [
    "DIGEST_HEX_LENGTH",
    "check_bucket_width",
    "digest_rhythm_key",
    "quantize_rhythm_key",
    "quantize_timings",
]
