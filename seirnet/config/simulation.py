"""Simulation configuration dataclasses, all frozen and slotted.

Each section validates its own fields in ``__post_init__``, so a section
handed directly to the builder or the engine is already known to be sane.
"""

from dataclasses import dataclass, field


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


def _check_optional_ceiling(name: str, value: int | None) -> None:
    if value is not None and value < 1:
        raise ValueError(f"{name} must be >= 1 when set, got {value}")


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Social graph generation parameters."""

    nbnodes: int = 300_000  # number of individuals
    edges_per_node: float = 5.0  # mean edge attempts per added node
    prob_unbiased: float = 0.2  # chance of a uniform pick instead of an edge endpoint
    max_attempts_per_node: int | None = None  # optional cap on edge attempts

    def __post_init__(self) -> None:
        if self.nbnodes < 0:
            raise ValueError(f"nbnodes must be >= 0, got {self.nbnodes}")
        if self.edges_per_node <= 0:
            raise ValueError(
                f"edges_per_node must be > 0, got {self.edges_per_node}"
            )
        _check_probability("prob_unbiased", self.prob_unbiased)
        _check_optional_ceiling("max_attempts_per_node", self.max_attempts_per_node)


@dataclass(frozen=True, slots=True)
class EpidemicConfig:
    """SEIR dynamics parameters."""

    init_seeds: int = 20
    contagiousness: float = 0.009  # per-neighbor, per-step infection probability
    extra_random_contagiousness: float = 0.01  # per-step chance of infecting a random node
    incubation_time: int = 5  # steps from infection to infectious
    recovery_time: int = 30  # steps from infection to recovered
    max_steps: int | None = None  # optional ceiling on the step loop

    def __post_init__(self) -> None:
        if self.init_seeds < 0:
            raise ValueError(f"init_seeds must be >= 0, got {self.init_seeds}")
        _check_probability("contagiousness", self.contagiousness)
        _check_probability(
            "extra_random_contagiousness", self.extra_random_contagiousness
        )
        if self.incubation_time < 1:
            raise ValueError(
                f"incubation_time must be >= 1, got {self.incubation_time}"
            )
        # An exposed node must turn infectious before it can recover
        if self.recovery_time <= self.incubation_time:
            raise ValueError(
                f"recovery_time ({self.recovery_time}) must exceed "
                f"incubation_time ({self.incubation_time})"
            )
        _check_optional_ceiling("max_steps", self.max_steps)


@dataclass(frozen=True, slots=True)
class StatisticsConfig:
    """Window lengths for the post-run growth statistics."""

    slope_ival: int = 20  # steps
    repnum_ival: int = 2  # generations

    def __post_init__(self) -> None:
        if self.slope_ival < 1:
            raise ValueError(f"slope_ival must be >= 1, got {self.slope_ival}")
        if self.repnum_ival < 1:
            raise ValueError(f"repnum_ival must be >= 1, got {self.repnum_ival}")


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Top-level simulation configuration composing all sub-configs.

    Sections arrive already validated; only run-level fields are checked
    here. A seed of None draws fresh entropy for every run.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    epidemic: EpidemicConfig = field(default_factory=EpidemicConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    seed: int | None = None
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
