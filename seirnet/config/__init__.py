"""Simulation configuration system with frozen, hashable, serializable dataclasses."""

from seirnet.config.simulation import (
    SimulationConfig,
    GraphConfig,
    EpidemicConfig,
    StatisticsConfig,
)
from seirnet.config.defaults import DEFAULT_CONFIG
from seirnet.config.hashing import (
    config_hash,
    graph_config_hash,
    parameter_hash,
    full_config_hash,
)
from seirnet.config.serialization import (
    config_to_json,
    config_from_json,
    config_to_dict,
    config_from_dict,
)

__all__ = [
    "SimulationConfig",
    "GraphConfig",
    "EpidemicConfig",
    "StatisticsConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "graph_config_hash",
    "parameter_hash",
    "full_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
