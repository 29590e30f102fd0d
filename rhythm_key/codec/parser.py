"""Parsing of ``t<ms><char>`` tokens into rhythm-keys."""

import logging
from typing import List

from rhythm_key.codec.encoder import FIELD_MARKER
from rhythm_key.errors import (
    EmptyInputError,
    MalformedHeaderError,
    MissingTimingError,
    ParseError,
    TimingOverflowError,
    TruncatedFieldError,
)
from rhythm_key.models.key import MAX_TIMING_MS, RhythmKey, TimedEvent

logger = logging.getLogger(__name__)

# Only ASCII digits count as timing; str.isdigit() also accepts other scripts.
_DIGITS = frozenset("0123456789")
_MAX_TIMING_DIGITS = len(str(MAX_TIMING_MS))


def _digit_is_character(token: str, end: int) -> bool:
    """
    Whether the last digit before ``end`` is the field's character.

    That is the case when the run reaches the end of the token, or when it
    is followed by a ``t`` that itself starts a field (a digit follows it).
    Reading ``t`` as the character there would leave a field without
    its marker.
    """
    if end == len(token):
        return True
    return (
        token[end] == FIELD_MARKER
        and end + 1 < len(token)
        and token[end + 1] in _DIGITS
    )


def parse_rhythm_key(token: str) -> RhythmKey:
    """
    Parse a token of the form ``( 't' DIGIT+ CHAR )+`` into a RhythmKey.

    The timing is the run of ASCII digits after each ``t`` and the next
    character belongs to the field even when it is a digit or a ``t``.  The
    run is maximal unless its last digit must be the character: at the end
    of the token (``"t105"`` is ``(10, "5")``) or before another field
    (``"t12t3x"`` is ``(1, "2"), (3, "x")``).  Every encoded key therefore
    parses back to itself.

    The first field's timing is kept as written.  Only capture guarantees
    that a key starts at 0 ms.

    Args:
        token: The serialized rhythm-key.

    Returns:
        The parsed RhythmKey.  Nothing is returned on failure.

    Raises:
        EmptyInputError: ``token`` is empty.
        MalformedHeaderError: a field does not start with ``t``.
        MissingTimingError: a ``t`` is not followed by a digit.
        TimingOverflowError: a timing exceeds the signed 64-bit range.
        TruncatedFieldError: a single-digit timing ends the token.
    """
    if not token:
        raise EmptyInputError()

    length = len(token)
    events: List[TimedEvent] = []
    pos = 0

    try:
        while pos < length:
            if token[pos] != FIELD_MARKER:
                raise MalformedHeaderError(
                    f"rhythm-key field must start with {FIELD_MARKER!r}", pos
                )
            start = pos + 1
            end = start
            while end < length and token[end] in _DIGITS:
                end += 1

            if end == start:
                raise MissingTimingError("missing timing after field marker", start)
            if end - start > 1 and _digit_is_character(token, end):
                end -= 1
            if end == length:
                raise TruncatedFieldError("missing character after timing", end)

            # Leading zeros are legal; the bound applies to the value.
            digits = token[start:end].lstrip("0") or "0"
            if len(digits) > _MAX_TIMING_DIGITS or int(digits) > MAX_TIMING_MS:
                raise TimingOverflowError(f"timing exceeds {MAX_TIMING_MS} ms", start)
            elapsed = int(digits)

            events.append(TimedEvent(elapsed=elapsed, char=token[end]))
            pos = end + 1
    except ParseError as e:
        logger.debug("Rejected token of length %d: %s", length, e)
        raise

    logger.debug("Parsed %d fields from token of length %d", len(events), length)
    return RhythmKey(tuple(events))
