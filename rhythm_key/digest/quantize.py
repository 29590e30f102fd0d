"""Bucket quantization of keystroke timings."""

from typing import List

import numpy as np

from rhythm_key.errors import InvalidBucketWidthError
from rhythm_key.models.key import MAX_TIMING_MS, RhythmKey, TimedEvent


def check_bucket_width(bucket_width: int) -> int:
    """Return ``bucket_width`` if it is a usable positive integer width."""
    if isinstance(bucket_width, bool) or not isinstance(bucket_width, (int, np.integer)):
        raise InvalidBucketWidthError(
            f"bucket width must be an integer, got {bucket_width!r}"
        )
    bucket_width = int(bucket_width)
    if bucket_width <= 0:
        raise InvalidBucketWidthError(
            f"bucket width must be positive, got {bucket_width}"
        )
    if bucket_width > MAX_TIMING_MS:
        raise InvalidBucketWidthError(
            f"bucket width must not exceed {MAX_TIMING_MS}, got {bucket_width}"
        )
    return bucket_width


def quantize_timings(timings: np.ndarray, bucket_width: int) -> List[int]:
    """
    Round each timing up to the next bucket boundary strictly above it.

    This is ``((t + w) // w) * w``: with ``w = 20``, 0 and 19 become 20 while
    20 and 39 become 40.  Two timings in the same bucket collapse to the same
    value, which is what makes digests tolerant of jitter.

    Args:
        timings: (N,) non-negative integer timings in milliseconds.
        bucket_width: bucket width in milliseconds.

    Returns:
        List of N quantized timings as Python ints.
    """
    bucket_width = check_bucket_width(bucket_width)
    timings = np.asarray(timings, dtype=np.int64)

    # t // w + 1 equals (t + w) // w for t >= 0 and stays within int64.
    steps = timings // bucket_width + 1
    return [step * bucket_width for step in steps.tolist()]


def quantize_rhythm_key(rk: RhythmKey, bucket_width: int) -> RhythmKey:
    """
    Return a new key with the same characters and quantized timings.

    Raises:
        ValueError: a quantized timing no longer fits a TimedEvent, which
            only happens within one bucket of the 64-bit limit.
    """
    quantized = quantize_timings(rk.timings, bucket_width)
    return RhythmKey(
        tuple(
            TimedEvent(elapsed=elapsed, char=event.char)
            for event, elapsed in zip(rk, quantized)
        )
    )
