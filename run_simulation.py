#!/usr/bin/env python3
"""Entry point for running an SEIR simulation on a synthetic social graph.

Chains all stages into a single executable command:
graph generation -> epidemic -> statistics -> outputs (tables, summary,
result.json, optional figures and HTML report).

Usage:
    python run_simulation.py --config config.json
    python run_simulation.py --config config.json --seed 7 --figures --html
    python run_simulation.py --config config.json --dry-run
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import asdict, replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from seirnet.config import (
    DEFAULT_CONFIG,
    SimulationConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
    parameter_hash,
)
from seirnet.results import generate_run_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(
    config: SimulationConfig,
    results_dir: str | Path = "results",
    figures: bool = False,
    html: bool = False,
    dump_graph: bool = False,
    dump_degrees: bool = False,
) -> Path:
    """Execute the full simulation pipeline and write all outputs.

    The graph, epidemic and statistics phases run through
    :func:`seirnet.pipeline.simulate`; this function only adds timing,
    output files and the optional figures and report.

    Returns:
        Path to the run output directory.
    """
    # Lazy imports to keep --dry-run fast
    from seirnet.graph import summarize_graph, write_degrees, write_dot
    from seirnet.pipeline import simulate
    from seirnet.reporting import (
        format_summary,
        generate_run_report,
        write_generations,
        write_summary,
        write_timeline,
    )
    from seirnet.reproducibility import make_random_source
    from seirnet.results import build_result, write_result

    pipeline_start = time.monotonic()

    rng = make_random_source(config.seed)
    run_id = generate_run_id(config, seed=rng.entropy)
    output_dir = Path(results_dir) / run_id
    output_dir.mkdir(parents=True, exist_ok=True)
    log.info("Output directory: %s", output_dir)
    log.info("Seed: %s (entropy %d)", config.seed, rng.entropy)

    # ── Stage 1: Simulation (graph -> epidemic -> statistics) ──────
    with stage_timer("Simulation"):
        result = simulate(config, rng)
    graph, run, report = result.graph, result.run, result.report

    # ── Stage 2: Graph Summary ─────────────────────────────────────
    with stage_timer("Graph Summary"):
        graph_summary = summarize_graph(graph)
        log.info(
            "Graph: mean degree %.2f, max degree %d, %d isolated, "
            "%d components (largest %d)",
            graph_summary.mean_degree,
            graph_summary.max_degree,
            graph_summary.isolated,
            graph_summary.n_components,
            graph_summary.largest_component,
        )
        if dump_graph:
            write_dot(graph, output_dir / "graph.dot")
        if dump_degrees:
            write_degrees(graph, output_dir / "degrees.tsv")

    summary = format_summary(report)
    for line in summary:
        log.info(line)

    # ── Stage 3: Outputs ───────────────────────────────────────────
    with stage_timer("Outputs"):
        write_timeline(run.snapshots, output_dir / "timeline.tsv")
        write_generations(run.generation_counts, output_dir / "generations.tsv")
        write_summary(report, output_dir / "summary.txt")
        payload = build_result(
            config,
            run_id,
            report.to_scalars(),
            summary,
            graph_summary=asdict(graph_summary),
            entropy=result.entropy,
        )
        write_result(payload, output_dir)

    if figures or html:
        with stage_timer("Visualization"):
            from seirnet.visualization import render_run_figures

            render_run_figures(run, output_dir)

    report_path = None
    if html:
        with stage_timer("Reporting"):
            report_path = generate_run_report(output_dir)

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Pipeline complete in {total_elapsed:.1f}s")
    print(f"  Run:      {run_id}")
    print(f"  Output:   {output_dir}")
    print(f"  Steps:    {report.steps}")
    print(f"  Attack:   {report.final_attack_rate:f}")
    if report_path is not None:
        print(f"  Report:   {report_path}")
    print(f"{'=' * 60}")

    return output_dir


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Simulate an SEIR epidemic on a synthetic social graph"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to simulation config JSON file (defaults to built-in parameters)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the config seed")
    parser.add_argument(
        "--output-dir", type=str, default="results", help="Base directory for run outputs"
    )
    parser.add_argument("--figures", action="store_true", help="Render PNG/SVG figures")
    parser.add_argument(
        "--html", action="store_true", help="Write a self-contained HTML report"
    )
    parser.add_argument(
        "--dump-graph", action="store_true", help="Write the social graph as DOT"
    )
    parser.add_argument(
        "--dump-degrees", action="store_true", help="Write the per-node degree listing"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the configuration without running the simulation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = DEFAULT_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = config_from_json(config_path.read_text())
        except (ValueError, DaciteError) as exc:
            print(f"Error: invalid config: {exc}", file=sys.stderr)
            sys.exit(1)
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    print(f"Config hash:   {full_config_hash(config)}")
    print(f"Graph hash:    {graph_config_hash(config)}")
    print(f"Params hash:   {parameter_hash(config)}")
    print()
    print(f"Graph:    nbnodes={config.graph.nbnodes}, "
          f"edges_per_node={config.graph.edges_per_node}, "
          f"prob_unbiased={config.graph.prob_unbiased}")
    print(f"Epidemic: init_seeds={config.epidemic.init_seeds}, "
          f"contagiousness={config.epidemic.contagiousness}, "
          f"extra_random_contagiousness={config.epidemic.extra_random_contagiousness}, "
          f"incubation_time={config.epidemic.incubation_time}, "
          f"recovery_time={config.epidemic.recovery_time}")
    print(f"Windows:  slope_ival={config.statistics.slope_ival}, "
          f"repnum_ival={config.statistics.repnum_ival}")
    print(f"Seed:     {config.seed if config.seed is not None else 'unseeded'}")

    if args.dry_run:
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(
            config,
            results_dir=args.output_dir,
            figures=args.figures,
            html=args.html,
            dump_graph=args.dump_graph,
            dump_degrees=args.dump_degrees,
        )
    except Exception:
        log.exception("Simulation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
