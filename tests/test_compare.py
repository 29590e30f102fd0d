"""Tests for reference vs attempt comparison."""

import numpy as np
import pytest

from rhythm_key.errors import InvalidBucketWidthError
from rhythm_key.evaluation.compare import compare_rhythm_keys
from rhythm_key.models.key import RhythmKey


def _make_key(timings, chars) -> RhythmKey:
    return RhythmKey.from_pairs(zip(chars, timings))


def test_matching_attempt():
    reference = _make_key([0, 150, 95], "abc")
    attempt = _make_key([0, 141, 99], "abc")
    result = compare_rhythm_keys(reference, attempt, 20)

    assert result.matched
    assert result.characters_match
    assert result.length_match
    np.testing.assert_array_equal(result.timing_deltas, [0, -9, 4])
    assert result.bucket_matches.tolist() == [True, True, True]


def test_timing_outside_bucket():
    reference = _make_key([0, 150, 95], "abc")
    attempt = _make_key([0, 161, 95], "abc")
    result = compare_rhythm_keys(reference, attempt, 20)

    assert not result.matched
    assert result.characters_match
    assert result.bucket_matches.tolist() == [True, False, True]


def test_wider_bucket_tolerates_more():
    reference = _make_key([0, 150, 95], "abc")
    attempt = _make_key([0, 161, 95], "abc")
    assert compare_rhythm_keys(reference, attempt, 100).matched


def test_different_characters():
    result = compare_rhythm_keys(
        _make_key([0, 10], "ab"), _make_key([0, 10], "ax"), 20
    )
    assert not result.matched
    assert not result.characters_match
    assert result.bucket_matches.tolist() == [True, True]


def test_different_lengths_use_common_prefix():
    result = compare_rhythm_keys(
        _make_key([0, 10, 20], "abc"), _make_key([0, 10], "ab"), 20
    )
    assert not result.length_match
    assert not result.matched
    assert result.timing_deltas.shape == (2,)


def test_to_dict_is_json_friendly():
    result = compare_rhythm_keys(_make_key([0], "a"), _make_key([0], "a"), 20)
    data = result.to_dict()
    assert data["matched"] is True
    assert data["bucket_matches"] == [True]
    assert data["timing_deltas"] == [0.0]
    assert len(data["reference_digest"]) == 64


def test_invalid_bucket_width():
    with pytest.raises(InvalidBucketWidthError):
        compare_rhythm_keys(_make_key([0], "a"), _make_key([0], "a"), 0)
