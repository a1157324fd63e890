"""Render every figure of a finished run into ``{output_dir}/figures``."""

import logging
from pathlib import Path

from seirnet.epidemic.run import EpidemicRun
from seirnet.visualization.style import apply_style, save_figure
from seirnet.visualization.timeline import plot_generations, plot_timeline

log = logging.getLogger(__name__)


def render_run_figures(run: EpidemicRun, output_dir: str | Path) -> list[Path]:
    """Write timeline, log-timeline and generation figures as PNG + SVG.

    Returns:
        Paths of all written files.
    """
    apply_style()
    figures_dir = Path(output_dir) / "figures"
    written: list[Path] = []

    written.extend(save_figure(plot_timeline(run.snapshots), figures_dir, "timeline"))
    written.extend(
        save_figure(
            plot_timeline(run.snapshots, log_scale=True),
            figures_dir,
            "timeline_log",
        )
    )
    if run.generation_counts:
        written.extend(
            save_figure(
                plot_generations(run.generation_counts), figures_dir, "generations"
            )
        )

    log.info("Generated %d figure files in %s", len(written), figures_dir)
    return written
