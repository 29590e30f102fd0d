"""Rhythm-key data model."""

from rhythm_key.models.key import MAX_TIMING_MS, RhythmKey, TimedEvent

__all__ = ["MAX_TIMING_MS", "RhythmKey", "TimedEvent"]
