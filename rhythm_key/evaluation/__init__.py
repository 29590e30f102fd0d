"""Comparison and visualization of rhythm-keys."""

from rhythm_key.evaluation.compare import ComparisonResult, compare_rhythm_keys
from rhythm_key.evaluation.visualization import plot_rhythm_comparison

__all__ = ["ComparisonResult", "compare_rhythm_keys", "plot_rhythm_comparison"]
