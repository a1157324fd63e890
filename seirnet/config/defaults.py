"""Default configuration with the reference simulation parameters."""

from seirnet.config.simulation import SimulationConfig

# Instantiated with all-default values: nbnodes=300k, edges_per_node=5,
# prob_unbiased=0.2, init_seeds=20, contagiousness=0.009,
# extra_random_contagiousness=0.01, incubation=5, recovery=30, unseeded.
DEFAULT_CONFIG = SimulationConfig()
