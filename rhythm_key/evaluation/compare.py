"""Comparison of a reference rhythm-key against a captured attempt."""

import logging
from dataclasses import dataclass

import numpy as np

from rhythm_key.digest.engine import digest_rhythm_key
from rhythm_key.digest.quantize import check_bucket_width, quantize_timings
from rhythm_key.models.key import RhythmKey

logger = logging.getLogger(__name__)


@dataclass
class ComparisonResult:
    """Outcome of comparing two rhythm-keys under one bucket width."""

    bucket_width: int
    characters_match: bool
    length_match: bool
    timing_deltas: np.ndarray  # (M,) attempt - reference over the common prefix, ms
    bucket_matches: np.ndarray  # (M,) quantized timings equal per keystroke
    reference_digest: str
    attempt_digest: str

    @property
    def digest_match(self) -> bool:
        return self.reference_digest == self.attempt_digest

    @property
    def matched(self) -> bool:
        """Whether the attempt would verify against the reference."""
        return self.digest_match

    def to_dict(self) -> dict:
        return {
            "bucket_width": self.bucket_width,
            "matched": self.matched,
            "characters_match": self.characters_match,
            "length_match": self.length_match,
            "timing_deltas": self.timing_deltas.tolist(),
            "bucket_matches": self.bucket_matches.tolist(),
            "reference_digest": self.reference_digest,
            "attempt_digest": self.attempt_digest,
        }


def compare_rhythm_keys(
    reference: RhythmKey,
    attempt: RhythmKey,
    bucket_width: int,
) -> ComparisonResult:
    """
    Compare an attempt with a reference key.

    Per-keystroke details cover the common prefix of both keys; the verdict
    is whether both digests agree.
    """
    bucket_width = check_bucket_width(bucket_width)
    common = min(len(reference), len(attempt))

    ref_timings = reference.timings[:common]
    att_timings = attempt.timings[:common]
    ref_quantized = quantize_timings(ref_timings, bucket_width)
    att_quantized = quantize_timings(att_timings, bucket_width)

    result = ComparisonResult(
        bucket_width=bucket_width,
        characters_match=reference.characters == attempt.characters,
        length_match=len(reference) == len(attempt),
        timing_deltas=att_timings.astype(np.float64) - ref_timings.astype(np.float64),
        bucket_matches=np.array(
            [r == a for r, a in zip(ref_quantized, att_quantized)], dtype=bool
        ),
        reference_digest=digest_rhythm_key(reference, bucket_width),
        attempt_digest=digest_rhythm_key(attempt, bucket_width),
    )

    logger.info(
        "Compared %d/%d keystrokes: %d in matching buckets, digest match=%s",
        len(attempt),
        len(reference),
        int(result.bucket_matches.sum()),
        result.digest_match,
    )
    return result
