"""Assembly of captured keystrokes into rhythm-keys."""

import logging
from typing import Iterable, List, Optional, Tuple

from rhythm_key.errors import CaptureSessionClosedError, SourceFailureError
from rhythm_key.models.key import RhythmKey, TimedEvent

logger = logging.getLogger(__name__)


class CaptureSession:
    """
    Accumulates one rhythm-key, one accepted keystroke at a time.

    The first keystroke is always stored at 0 ms since nothing precedes it.
    Later keystrokes keep their measured wait truncated to whole ms.  A
    session produces exactly one key: after :meth:`finish` or
    :meth:`abandon` it refuses further use.
    """

    def __init__(self):
        self._events: List[TimedEvent] = []
        self._closed = False

    def __len__(self) -> int:
        return len(self._events)

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise CaptureSessionClosedError("capture session already finished")

    def accept(self, char: str, elapsed_ms: float) -> TimedEvent:
        """Append one keystroke and return the stored event."""
        self._check_open()
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must not be negative, got {elapsed_ms}")

        elapsed = 0 if not self._events else int(elapsed_ms)
        event = TimedEvent(elapsed=elapsed, char=char)
        self._events.append(event)
        logger.debug("Accepted keystroke %d after %d ms", len(self._events), elapsed)
        return event

    def finish(self) -> RhythmKey:
        """Close the session and return the assembled key."""
        self._check_open()
        self._closed = True
        rk = RhythmKey(tuple(self._events))
        logger.info("Captured rhythm-key with %d keystrokes", len(rk))
        return rk

    def abandon(self) -> None:
        """Close the session and drop whatever was captured."""
        self._check_open()
        self._closed = True
        logger.info("Abandoned capture after %d keystrokes", len(self._events))
        self._events = []


def assemble_rhythm_key(
    source: Iterable[Tuple[str, float]],
    terminator: Optional[str] = "\n",
) -> RhythmKey:
    """
    Build a rhythm-key from a keystroke source.

    Args:
        source: Iterable of ``(char, elapsed_ms)`` pairs, such as a
            :class:`~rhythm_key.capture.source.TerminalSource`.  Running out
            of pairs is a clean end of input.
        terminator: Keystroke that ends the capture without being recorded.
            ``None`` reads until the source is exhausted.

    Returns:
        The captured RhythmKey, starting at 0 ms.

    Raises:
        SourceFailureError: the source raised instead of ending cleanly.
    """
    session = CaptureSession()
    keystrokes = iter(source)

    while True:
        try:
            keystroke = next(keystrokes, None)
        except SourceFailureError:
            session.abandon()
            raise
        except Exception as e:
            session.abandon()
            raise SourceFailureError(f"capture source failed: {e}") from e

        if keystroke is None:
            break
        char, elapsed_ms = keystroke
        if terminator is not None and char == terminator:
            break
        session.accept(char, elapsed_ms)

    return session.finish()
