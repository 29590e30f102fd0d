"""Rhythm-key data model: an ordered sequence of timed keystrokes."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple

import numpy as np

# Largest elapsed time (ms) a field may carry.
MAX_TIMING_MS = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class TimedEvent:
    """One keystroke and the time elapsed since the previous accepted one."""

    elapsed: int  # milliseconds
    char: str

    def __post_init__(self):
        if isinstance(self.elapsed, bool) or not isinstance(self.elapsed, int):
            raise ValueError(
                f"elapsed must be an integer number of ms, got {self.elapsed!r}"
            )
        if not 0 <= self.elapsed <= MAX_TIMING_MS:
            raise ValueError(f"elapsed out of range: {self.elapsed}")
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"char must be a single character, got {self.char!r}")


@dataclass(frozen=True)
class RhythmKey:
    """
    An immutable, ordered sequence of :class:`TimedEvent`.

    Keys built by capture always start with ``elapsed == 0``.  Keys built
    by parsing keep whatever the first field encoded.

    Example::

        rk = RhythmKey.from_pairs([("a", 0), ("b", 150)])
        rk.encode()        # "t0at150b"
        str(rk)            # "a(0)b(150)"
        rk.digest(20)      # 64 hex characters
    """

    events: Tuple[TimedEvent, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of events but always store a tuple.
        object.__setattr__(self, "events", tuple(self.events))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, int]]) -> "RhythmKey":
        """Build a key from ``(char, elapsed_ms)`` pairs, as given."""
        return cls(
            tuple(TimedEvent(elapsed=elapsed, char=char) for char, elapsed in pairs)
        )

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[TimedEvent]:
        return iter(self.events)

    def __getitem__(self, idx: int) -> TimedEvent:
        return self.events[idx]

    def __str__(self) -> str:
        return self.display()

    @property
    def characters(self) -> str:
        """The typed text without timings."""
        return "".join(event.char for event in self.events)

    @property
    def timings(self) -> np.ndarray:
        """(N,) int64 array of elapsed times in milliseconds."""
        return np.array([event.elapsed for event in self.events], dtype=np.int64)

    def encode(self) -> str:
        from rhythm_key.codec.encoder import encode_rhythm_key

        return encode_rhythm_key(self)

    def display(self) -> str:
        from rhythm_key.codec.encoder import display_rhythm_key

        return display_rhythm_key(self)

    def quantized(self, bucket_width: int) -> "RhythmKey":
        from rhythm_key.digest.quantize import quantize_rhythm_key

        return quantize_rhythm_key(self, bucket_width)

    def digest(self, bucket_width: int) -> str:
        from rhythm_key.digest.engine import digest_rhythm_key

        return digest_rhythm_key(self, bucket_width)
