"""Tests for token encoding and display rendering."""

from rhythm_key.capture.assembly import assemble_rhythm_key
from rhythm_key.capture.source import IterableSource
from rhythm_key.codec.encoder import display_rhythm_key, encode_rhythm_key
from rhythm_key.codec.parser import parse_rhythm_key
from rhythm_key.models.key import RhythmKey


def test_encode_empty():
    assert encode_rhythm_key(RhythmKey()) == ""


def test_encode_fields():
    rk = RhythmKey.from_pairs([("a", 0), ("b", 150), ("5", 10)])
    assert encode_rhythm_key(rk) == "t0at150bt105"


def test_display():
    rk = RhythmKey.from_pairs([("h", 0), ("i", 87)])
    assert display_rhythm_key(rk) == "h(0)i(87)"
    assert display_rhythm_key(RhythmKey()) == ""


def test_round_trip_captured_key():
    source = IterableSource(
        [("p", 431.7), ("w", 120.2), ("t", 99.9), (" ", 0.4), ("\x01", 1024.0), ("7", 3.0)]
    )
    rk = assemble_rhythm_key(source)
    assert rk[0].elapsed == 0

    parsed = parse_rhythm_key(encode_rhythm_key(rk))
    assert parsed == rk
    assert [e.elapsed for e in parsed] == [0, 120, 99, 0, 1024, 3]


def test_encode_parsed_token_is_identity():
    token = "t999at0tt1234567"
    assert encode_rhythm_key(parse_rhythm_key(token)) == token


def test_round_trip_digit_characters():
    rk = RhythmKey.from_pairs(
        [("a", 0), ("4", 120), ("b", 5), ("1", 2), ("t", 12), ("9", 0), ("0", 7)]
    )
    token = encode_rhythm_key(rk)
    assert token == "t0at1204t5bt21t12tt09t70"
    assert parse_rhythm_key(token) == rk
