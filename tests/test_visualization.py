"""Tests for comparison plots."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from rhythm_key.errors import InvalidBucketWidthError  # noqa: E402
from rhythm_key.evaluation.visualization import plot_rhythm_comparison  # noqa: E402
from rhythm_key.models.key import RhythmKey  # noqa: E402


def _make_key(timings, chars) -> RhythmKey:
    return RhythmKey.from_pairs(zip(chars, timings))


def test_plot_returns_figure(tmp_path):
    out = tmp_path / "comparison.png"
    fig = plot_rhythm_comparison(
        _make_key([0, 150, 95], "abc"),
        _make_key([0, 141], "ab"),
        20,
        save_path=str(out),
    )
    try:
        assert isinstance(fig, plt.Figure)
        assert out.exists()
        ax = fig.axes[0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["a", "b", "c"]
    finally:
        plt.close(fig)


def test_plot_escapes_control_characters():
    fig = plot_rhythm_comparison(
        _make_key([0, 5], "\tx"), _make_key([0, 5], "\tx"), 20
    )
    try:
        labels = [t.get_text() for t in fig.axes[0].get_xticklabels()]
        assert labels == ["\\t", "x"]
    finally:
        plt.close(fig)


def test_plot_empty_keys():
    fig = plot_rhythm_comparison(RhythmKey(), RhythmKey(), 20)
    plt.close(fig)


def test_plot_invalid_bucket_width():
    with pytest.raises(InvalidBucketWidthError):
        plot_rhythm_comparison(RhythmKey(), RhythmKey(), 0)
