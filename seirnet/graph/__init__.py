"""Social graph generation, validation and export."""

from seirnet.graph.builder import build_from_config, build_social_graph, pick_candidate
from seirnet.graph.export import iter_dot_lines, write_degrees, write_dot
from seirnet.graph.types import SocialGraph
from seirnet.graph.validation import (
    DegreeSummary,
    GraphConstructionError,
    check_graph,
    summarize_graph,
    validate_graph,
)

__all__ = [
    "DegreeSummary",
    "GraphConstructionError",
    "SocialGraph",
    "build_from_config",
    "build_social_graph",
    "check_graph",
    "iter_dot_lines",
    "pick_candidate",
    "summarize_graph",
    "validate_graph",
    "write_degrees",
    "write_dot",
]
