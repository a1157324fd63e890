"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from seirnet.config.simulation import SimulationConfig


def generate_run_id(config: SimulationConfig, seed: int | None = None) -> str:
    """Generate a scannable run ID from config parameters.

    Format: n{nbnodes}_e{edges_per_node}_u{prob_unbiased}_c{contagiousness}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: n300000_e5_u0.2_c0.009_s42_20260224_143012

    ``seed`` overrides the config seed (used for the resolved entropy of
    unseeded runs); "sX" marks a run with neither.
    """
    if seed is None:
        seed = config.seed
    seed_part = "X" if seed is None else str(seed)
    ts = datetime.now(timezone.utc)
    return (
        f"n{config.graph.nbnodes}"
        f"_e{config.graph.edges_per_node:g}"
        f"_u{config.graph.prob_unbiased:g}"
        f"_c{config.epidemic.contagiousness:g}"
        f"_s{seed_part}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
