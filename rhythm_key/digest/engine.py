"""Salted, quantized SHA-256 fingerprints of rhythm-keys."""

import hashlib
import logging

from rhythm_key.codec.encoder import encode_fields
from rhythm_key.digest.quantize import check_bucket_width, quantize_timings
from rhythm_key.models.key import RhythmKey

logger = logging.getLogger(__name__)

DIGEST_HEX_LENGTH = 64


def digest_rhythm_key(rk: RhythmKey, bucket_width: int) -> str:
    """
    Fingerprint a rhythm-key so that small timing jitter does not matter.

    The key is quantized with ``bucket_width`` (see
    :func:`~rhythm_key.digest.quantize.quantize_timings`), re-encoded as a
    token and hashed with SHA-256.

    Args:
        rk: The rhythm-key to fingerprint.  It is not modified.
        bucket_width: Quantization bucket width in milliseconds (the "salt").

    Returns:
        64 lowercase hexadecimal characters.

    Raises:
        InvalidBucketWidthError: ``bucket_width`` is not a positive integer.
    """
    bucket_width = check_bucket_width(bucket_width)
    quantized = quantize_timings(rk.timings, bucket_width)
    canonical = encode_fields(zip(quantized, rk.characters))

    logger.debug(
        "Digesting %d keystrokes with bucket width %d ms", len(rk), bucket_width
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
