"""Short SHA-256 fingerprints of simulation configs.

Three identities are used when comparing runs:

* ``graph_config_hash``: runs that build the same kind of social graph.
* ``parameter_hash``: replicates of one parameter set (seed and labels dropped).
* ``full_config_hash``: one exact, reproducible run.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any, Iterable

from seirnet.config.simulation import SimulationConfig

# Fields that label or replicate a run without changing its parameters
_RUN_LABEL_FIELDS = ("seed", "description", "tags")


def _drop(tree: dict[str, Any], dotted: str) -> None:
    """Delete ``tree["a"]["b"]`` for ``dotted == "a.b"``; missing paths are ignored."""
    *parents, leaf = dotted.split(".")
    for key in parents:
        tree = tree.get(key)
        if not isinstance(tree, dict):
            return
    tree.pop(leaf, None)


def config_hash(config: Any, exclude: Iterable[str] = ()) -> str:
    """Hash a config dataclass (or sub-config) to 16 hex characters.

    Args:
        config: Dataclass instance to fingerprint.
        exclude: Dotted field paths left out of the hash, e.g. "graph.nbnodes".
    """
    tree = asdict(config)
    for dotted in exclude:
        _drop(tree, dotted)
    canonical = json.dumps(tree, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def graph_config_hash(config: SimulationConfig) -> str:
    return config_hash(config.graph)


def parameter_hash(config: SimulationConfig) -> str:
    """Same value for every seed of one graph/epidemic/statistics setting."""
    return config_hash(config, exclude=_RUN_LABEL_FIELDS)


def full_config_hash(config: SimulationConfig) -> str:
    return config_hash(config)
