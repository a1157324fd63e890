"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required
fields and types before writing result.json files.
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from seirnet.config.simulation import SimulationConfig
from seirnet.config.hashing import (
    full_config_hash,
    graph_config_hash,
    parameter_hash,
)

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
    "metadata",
}

REQUIRED_SCALARS = {
    "n",
    "steps",
    "final_attack_rate",
    "total_attempted_infections",
    "growth_slope",
    "reproduction_number",
}

WINDOW_FIELDS = ("value", "start", "end")


def build_result(
    config: SimulationConfig,
    run_id: str,
    scalars: dict[str, Any],
    summary: list[str],
    graph_summary: dict[str, Any] | None = None,
    entropy: int | None = None,
) -> dict[str, Any]:
    """Assemble the result.json payload of one run."""
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": asdict(config),
        "metrics": {
            "scalars": scalars,
            "summary": summary,
            "graph": graph_summary or {},
        },
        "metadata": {
            "config_hash": full_config_hash(config),
            "graph_config_hash": graph_config_hash(config),
            "parameter_hash": parameter_hash(config),
            "seed": config.seed,
            "entropy": entropy,
        },
    }


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if metrics is not None:
        if not isinstance(metrics, dict):
            errors.append("metrics must be a dict")
        elif not isinstance(metrics.get("scalars"), dict):
            errors.append("metrics.scalars is required")
        else:
            scalars = metrics["scalars"]
            missing_scalars = REQUIRED_SCALARS - set(scalars.keys())
            if missing_scalars:
                errors.append(
                    f"metrics.scalars missing fields: {sorted(missing_scalars)}"
                )
            # Window estimates are either null or a full {value, start, end}
            for name in ("growth_slope", "reproduction_number"):
                estimate = scalars.get(name)
                if estimate is None:
                    continue
                if not isinstance(estimate, dict):
                    errors.append(f"metrics.scalars.{name} must be a dict or null")
                    continue
                for field in WINDOW_FIELDS:
                    if field not in estimate:
                        errors.append(f"metrics.scalars.{name} missing field: {field}")

    return errors


def write_result(result: dict[str, Any], output_dir: str | Path) -> Path:
    """Validate and write ``{output_dir}/result.json``.

    Raises:
        ValueError: If the result fails schema validation.
    """
    errors = validate_result(result)
    if errors:
        raise ValueError(f"Result validation failed: {'; '.join(errors)}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    result_path = output_dir / "result.json"
    with open(result_path, "w") as f:
        json.dump(result, f, indent=2)
    log.info("Result written to %s", result_path)
    return result_path


def load_result(path: str | Path) -> dict[str, Any]:
    with open(path) as f:
        return json.load(f)
