"""
Rhythm-key - passphrases that include the rhythm they are typed with.

A rhythm-key is the sequence of characters typed together with the delay
before each one.  Keys serialize to a compact ``t<ms><char>`` token and can
be fingerprinted with a quantized SHA-256 digest that tolerates small
timing jitter.
"""

from rhythm_key.capture.assembly import CaptureSession, assemble_rhythm_key
from rhythm_key.codec.encoder import display_rhythm_key, encode_rhythm_key
from rhythm_key.codec.parser import parse_rhythm_key
from rhythm_key.config import Config
from rhythm_key.digest.engine import digest_rhythm_key
from rhythm_key.digest.quantize import quantize_rhythm_key
from rhythm_key.models.key import RhythmKey, TimedEvent

__version__ = "0.1.0"
__all__ = [
    "CaptureSession",
    "Config",
    "RhythmKey",
    "TimedEvent",
    "assemble_rhythm_key",
    "digest_rhythm_key",
    "display_rhythm_key",
    "encode_rhythm_key",
    "parse_rhythm_key",
    "quantize_rhythm_key",
]
