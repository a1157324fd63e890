"""Tests for the simulation configuration system."""

import json
import re

import pytest
from dataclasses import FrozenInstanceError, replace

from seirnet.config import (
    SimulationConfig,
    GraphConfig,
    EpidemicConfig,
    StatisticsConfig,
    DEFAULT_CONFIG,
    config_hash,
    graph_config_hash,
    full_config_hash,
    parameter_hash,
    config_to_json,
    config_from_json,
)


class TestDefaultConfig:
    """DEFAULT_CONFIG carries the reference parameters."""

    def test_default_config_values(self):
        assert DEFAULT_CONFIG.graph.nbnodes == 300_000
        assert DEFAULT_CONFIG.graph.edges_per_node == 5
        assert DEFAULT_CONFIG.graph.prob_unbiased == 0.2
        assert DEFAULT_CONFIG.epidemic.init_seeds == 20
        assert DEFAULT_CONFIG.epidemic.contagiousness == 0.009
        assert DEFAULT_CONFIG.epidemic.extra_random_contagiousness == 0.01
        assert DEFAULT_CONFIG.epidemic.incubation_time == 5
        assert DEFAULT_CONFIG.epidemic.recovery_time == 30
        assert DEFAULT_CONFIG.statistics.slope_ival == 20
        assert DEFAULT_CONFIG.statistics.repnum_ival == 2
        assert DEFAULT_CONFIG.seed is None

    def test_safety_ceilings_off_by_default(self):
        assert DEFAULT_CONFIG.graph.max_attempts_per_node is None
        assert DEFAULT_CONFIG.epidemic.max_steps is None


class TestConfigImmutability:
    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_graph_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.graph.nbnodes = 10  # type: ignore[misc]

    def test_epidemic_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.epidemic.contagiousness = 0.5  # type: ignore[misc]


class TestConfigRoundTrip:
    """JSON serialization round-trip preserves identity."""

    def test_config_round_trip_hash(self):
        restored = config_from_json(config_to_json(DEFAULT_CONFIG))
        assert config_hash(DEFAULT_CONFIG) == config_hash(restored)

    def test_config_round_trip_seeded(self):
        cfg = replace(DEFAULT_CONFIG, seed=7, tags=("baseline", "small"))
        restored = config_from_json(config_to_json(cfg))
        assert restored == cfg
        assert restored.tags == ("baseline", "small")

    def test_integer_accepted_for_float_field(self):
        restored = config_from_json(
            json.dumps({"graph": {"nbnodes": 100, "edges_per_node": 3}})
        )
        assert restored.graph.edges_per_node == 3.0
        assert isinstance(restored.graph.edges_per_node, float)

    def test_missing_sections_use_defaults(self):
        restored = config_from_json(json.dumps({"seed": 5}))
        assert restored.seed == 5
        assert restored.epidemic == EpidemicConfig()


class TestConfigHashing:
    def test_graph_hash_ignores_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99)
        assert graph_config_hash(DEFAULT_CONFIG) == graph_config_hash(cfg2)

    def test_graph_hash_ignores_epidemic(self):
        cfg2 = replace(DEFAULT_CONFIG, epidemic=EpidemicConfig(contagiousness=0.5))
        assert graph_config_hash(DEFAULT_CONFIG) == graph_config_hash(cfg2)

    def test_full_hash_includes_seed(self):
        cfg2 = replace(DEFAULT_CONFIG, seed=99)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(cfg2)

    def test_parameter_hash_groups_replicates(self):
        replicate = replace(DEFAULT_CONFIG, seed=7, description="rep", tags=("a",))
        assert parameter_hash(DEFAULT_CONFIG) == parameter_hash(replicate)
        assert full_config_hash(DEFAULT_CONFIG) != full_config_hash(replicate)

    def test_parameter_hash_tracks_parameters(self):
        cfg2 = replace(DEFAULT_CONFIG, statistics=StatisticsConfig(slope_ival=5))
        assert parameter_hash(DEFAULT_CONFIG) != parameter_hash(cfg2)

    def test_config_hash_is_hex_string(self):
        h = full_config_hash(DEFAULT_CONFIG)
        assert re.match(r"^[0-9a-f]{16}$", h)

    def test_exclude_fields(self):
        cfg2 = replace(DEFAULT_CONFIG, graph=GraphConfig(nbnodes=10))
        assert config_hash(DEFAULT_CONFIG, ["graph.nbnodes"]) == config_hash(
            cfg2, ["graph.nbnodes"]
        )


class TestConfigValidation:
    """Cross-parameter validation catches invalid configs."""

    def test_negative_nbnodes(self):
        with pytest.raises(ValueError, match="nbnodes"):
            SimulationConfig(graph=GraphConfig(nbnodes=-1))

    def test_zero_nbnodes_allowed(self):
        cfg = SimulationConfig(graph=GraphConfig(nbnodes=0))
        assert cfg.graph.nbnodes == 0

    def test_edges_per_node_positive(self):
        with pytest.raises(ValueError, match="edges_per_node"):
            SimulationConfig(graph=GraphConfig(edges_per_node=0))

    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_prob_unbiased_range(self, value):
        with pytest.raises(ValueError, match="prob_unbiased"):
            SimulationConfig(graph=GraphConfig(prob_unbiased=value))

    def test_contagiousness_range(self):
        with pytest.raises(ValueError, match="contagiousness"):
            SimulationConfig(epidemic=EpidemicConfig(contagiousness=2.0))

    def test_recovery_must_exceed_incubation(self):
        with pytest.raises(ValueError, match="recovery_time"):
            SimulationConfig(
                epidemic=EpidemicConfig(incubation_time=5, recovery_time=5)
            )

    def test_incubation_at_least_one(self):
        with pytest.raises(ValueError, match="incubation_time"):
            SimulationConfig(epidemic=EpidemicConfig(incubation_time=0))

    def test_max_steps_positive(self):
        with pytest.raises(ValueError, match="max_steps"):
            SimulationConfig(epidemic=EpidemicConfig(max_steps=0))

    def test_bare_epidemic_section_rejected_on_construction(self):
        with pytest.raises(ValueError, match="must exceed incubation_time"):
            EpidemicConfig(incubation_time=5, recovery_time=3)

    def test_bare_graph_section_rejected_on_construction(self):
        with pytest.raises(ValueError, match="prob_unbiased"):
            GraphConfig(prob_unbiased=1.5)

    def test_negative_seed(self):
        with pytest.raises(ValueError, match="seed"):
            SimulationConfig(seed=-1)

    def test_window_lengths_positive(self):
        with pytest.raises(ValueError, match="slope_ival"):
            SimulationConfig(statistics=StatisticsConfig(slope_ival=0))
        with pytest.raises(ValueError, match="repnum_ival"):
            SimulationConfig(statistics=StatisticsConfig(repnum_ival=0))


class TestSerializationStrict:
    def test_serialization_strict_rejects_extra_keys(self):
        data = json.loads(config_to_json(DEFAULT_CONFIG))
        data["unknown_field"] = "sneaky"
        with pytest.raises(Exception):
            config_from_json(json.dumps(data))

    def test_serialization_rejects_wrong_type(self):
        with pytest.raises(Exception):
            config_from_json(json.dumps({"graph": {"nbnodes": "many"}}))


class TestModuleLayout:
    def test_config_classes_live_in_simulation_module(self):
        from seirnet.config import simulation

        for cls in (SimulationConfig, GraphConfig, EpidemicConfig, StatisticsConfig):
            assert cls.__module__ == "seirnet.config.simulation"
            assert getattr(simulation, cls.__name__) is cls
