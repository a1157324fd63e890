"""Result schema validation, writing, and run ID generation."""

from seirnet.results.run_id import generate_run_id
from seirnet.results.schema import (
    SCHEMA_VERSION,
    build_result,
    load_result,
    validate_result,
    write_result,
)

__all__ = [
    "SCHEMA_VERSION",
    "build_result",
    "generate_run_id",
    "load_result",
    "validate_result",
    "write_result",
]
