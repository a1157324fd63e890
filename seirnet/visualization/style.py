"""Shared look for run figures and the PNG + SVG writer.

Compartments keep the same color in every plot.
"""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for headless rendering

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=8)
COMPARTMENT_COLORS = {
    "susceptible": PALETTE[0],
    "exposed": PALETTE[1],
    "infectious": PALETTE[3],
    "recovered": PALETTE[2],
}

FIGURE_FORMATS = ("png", "svg")


def apply_style() -> None:
    """Seaborn whitegrid with wide axes for long timelines. Idempotent."""
    sns.set_theme(style="whitegrid", palette=PALETTE)
    plt.rcParams.update({
        "figure.dpi": 150,
        "savefig.dpi": 300,
        "figure.figsize": (10, 4.5),
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 11,
        "legend.fontsize": 9,
        "lines.linewidth": 1.5,
        "svg.fonttype": "none",
    })


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, Path]:
    """Write ``{name}.png`` and ``{name}.svg`` under ``output_dir`` and close ``fig``.

    Returns:
        Tuple of (png_path, svg_path).
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for ext in FIGURE_FORMATS:
        path = output_dir / f"{name}.{ext}"
        fig.savefig(path, bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    return paths[0], paths[1]
