"""Visualization utilities for rhythm-key comparison."""

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from rhythm_key.digest.quantize import check_bucket_width
from rhythm_key.models.key import RhythmKey

# Beyond this many buckets the grid hides the bars.
MAX_BOUNDARY_LINES = 100


def plot_rhythm_comparison(
    reference: RhythmKey,
    attempt: RhythmKey,
    bucket_width: int,
    title: str = "Rhythm-Key Comparison",
    save_path: Optional[str] = None,
) -> plt.Figure:
    """
    Plot reference vs attempt keystroke timings side by side.

    Horizontal lines mark bucket boundaries; two bars between the same pair
    of lines quantize to the same value.

    Args:
        reference: The stored rhythm-key.
        attempt: The freshly captured rhythm-key.
        bucket_width: Quantization bucket width in ms.
        title: Plot title.
        save_path: If given, saves the figure to this path.

    Returns:
        The matplotlib Figure.
    """
    bucket_width = check_bucket_width(bucket_width)
    n = max(len(reference), len(attempt))
    x = np.arange(n)

    ref = np.zeros(n)
    ref[: len(reference)] = reference.timings
    att = np.zeros(n)
    att[: len(attempt)] = attempt.timings

    fig, ax = plt.subplots(figsize=(12, 4))

    ax.bar(x - 0.15, ref, width=0.3, label="Reference", alpha=0.7, color="steelblue")
    ax.bar(x + 0.15, att, width=0.3, label="Attempt", alpha=0.7, color="salmon")

    top = max(float(ref.max(initial=0)), float(att.max(initial=0)))
    num_boundaries = int(top // bucket_width) + 1
    if num_boundaries <= MAX_BOUNDARY_LINES:
        for k in range(1, num_boundaries + 1):
            ax.axhline(k * bucket_width, color="gray", linewidth=0.5, alpha=0.4)

    longer = reference if len(reference) >= len(attempt) else attempt
    labels = longer.characters
    ax.set_xticks(x)
    ax.set_xticklabels([repr(c)[1:-1] for c in labels])
    ax.set_xlabel("Keystroke")
    ax.set_ylabel("Elapsed (ms)")
    ax.set_title(f"{title} (bucket {bucket_width} ms)")
    ax.legend()

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig
