"""Figures for simulation runs: SEIR timeline and per-generation counts."""

from seirnet.visualization.render import render_run_figures
from seirnet.visualization.style import apply_style, save_figure
from seirnet.visualization.timeline import plot_generations, plot_timeline

__all__ = [
    "apply_style",
    "plot_generations",
    "plot_timeline",
    "render_run_figures",
    "save_figure",
]
