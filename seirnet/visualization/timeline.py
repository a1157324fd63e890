"""SEIR timeline and generation-size plots."""

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from seirnet.epidemic.types import Snapshot
from seirnet.visualization.style import COMPARTMENT_COLORS, PALETTE


def plot_timeline(
    snapshots: Sequence[Snapshot], log_scale: bool = False
) -> plt.Figure:
    """Plot S, E, I and R counts against the step index.

    Args:
        snapshots: Run timeline, one snapshot per step.
        log_scale: Use a log y-axis, which makes exponential growth
            phases appear as straight lines.

    Returns:
        The matplotlib Figure.
    """
    fig, ax = plt.subplots()
    steps = np.array([s.step for s in snapshots])

    for name, color in COMPARTMENT_COLORS.items():
        counts = np.array([getattr(s, name) for s in snapshots])
        if log_scale:
            counts = np.where(counts > 0, counts, np.nan)
        ax.plot(steps, counts, color=color, linewidth=1.5, label=name.title())

    if log_scale:
        ax.set_yscale("log")
    ax.set_xlabel("Step")
    ax.set_ylabel("Individuals")
    ax.set_title("SEIR timeline")
    ax.legend()
    fig.tight_layout()
    return fig


def plot_generations(generation_counts: Sequence[int]) -> plt.Figure:
    """Bar chart of the number of nodes first infected in each generation."""
    fig, ax = plt.subplots()
    generations = np.arange(len(generation_counts))
    ax.bar(generations, generation_counts, color=PALETTE[3], alpha=0.8)
    ax.set_xlabel("Generation")
    ax.set_ylabel("New infections")
    ax.set_title("Infections per generation")
    fig.tight_layout()
    return fig
