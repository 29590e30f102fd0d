"""Live capture of rhythm-keys."""

from rhythm_key.capture.assembly import CaptureSession, assemble_rhythm_key
from rhythm_key.capture.source import (
    IterableSource,
    Keystroke,
    TerminalSource,
    raw_terminal_mode,
)

__all__ = [
    "CaptureSession",
    "IterableSource",
    "Keystroke",
    "TerminalSource",
    "assemble_rhythm_key",
    "raw_terminal_mode",
]
