"""Serialization of rhythm-keys to the ``t<ms><char>`` token format."""

from typing import Iterable, Tuple

from rhythm_key.models.key import RhythmKey

FIELD_MARKER = "t"


def encode_fields(fields: Iterable[Tuple[int, str]]) -> str:
    """Encode ``(elapsed_ms, char)`` pairs as ``"t" + str(elapsed) + char`` each."""
    return "".join(f"{FIELD_MARKER}{elapsed:d}{char}" for elapsed, char in fields)


def encode_rhythm_key(rk: RhythmKey) -> str:
    """
    Encode a rhythm-key as a token.

    An empty key encodes to the empty string.  Parsing the result always
    gives the key back.
    """
    return encode_fields((event.elapsed, event.char) for event in rk)


def display_rhythm_key(rk: RhythmKey) -> str:
    """Human-readable ``char(ms)`` rendering, for diagnostics only."""
    return "".join(f"{event.char}({event.elapsed:d})" for event in rk)
