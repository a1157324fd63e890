"""Single-run HTML report generator.

Produces a self-contained HTML file with base64-embedded figures, the
configuration grouped into tables, scalar statistics and the summary
lines of the run.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seirnet.reporting.embed import embed_figure
from seirnet.results.schema import load_result

log = logging.getLogger(__name__)

# Template directory relative to this file
_TEMPLATE_DIR = Path(__file__).parent / "templates"


def _build_config_tables(config: dict[str, Any]) -> dict[str, list[dict[str, Any]]]:
    """Group config parameters into Graph / Epidemic / Statistics / Run tables."""
    tables: dict[str, list[dict[str, Any]]] = {}
    for section in ("graph", "epidemic", "statistics"):
        params = config.get(section, {})
        tables[section.title()] = [
            {"name": name, "value": "N/A" if value is None else value}
            for name, value in params.items()
        ]
    tables["Run"] = [
        {"name": "seed", "value": config.get("seed", "N/A")},
        {"name": "description", "value": config.get("description", "")},
    ]
    return tables


def _collect_figures(figures_dir: Path) -> list[dict[str, str]]:
    """Embed every PNG under ``figures_dir``, titled from its file name."""
    figures: list[dict[str, str]] = []
    if not figures_dir.exists():
        return figures
    for png_file in sorted(figures_dir.glob("*.png")):
        data_uri = embed_figure(png_file)
        if data_uri:
            title = png_file.stem.replace("_", " ").title()
            figures.append({"title": title, "data_uri": data_uri})
    return figures


def _format_scalar(value: Any) -> Any:
    if value is None:
        return "undefined"
    if isinstance(value, dict):
        return ", ".join(f"{k}={_format_scalar(v)}" for k, v in value.items())
    if isinstance(value, float):
        return f"{value:.6f}"
    return value


def generate_run_report(
    result_dir: str | Path,
    output_path: str | Path | None = None,
) -> Path:
    """Render ``{result_dir}/report.html`` from result.json and figures/.

    Args:
        result_dir: Path to a run output directory holding result.json.
        output_path: Where to write the HTML. Defaults to {result_dir}/report.html.

    Returns:
        Path to the generated HTML report file.
    """
    result_dir = Path(result_dir)
    result = load_result(result_dir / "result.json")
    metrics = result.get("metrics", {})

    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("run_report.html")

    html = template.render(
        run_id=result.get("run_id", "Unknown"),
        timestamp=result.get("timestamp", ""),
        description=result.get("description", ""),
        config_tables=_build_config_tables(result.get("config", {})),
        scalar_metrics={
            k: _format_scalar(v) for k, v in metrics.get("scalars", {}).items()
        },
        summary_lines=metrics.get("summary", []),
        graph_summary=metrics.get("graph", {}),
        figures=_collect_figures(result_dir / "figures"),
        metadata=result.get("metadata", {}),
    )

    if output_path is None:
        output_path = result_dir / "report.html"
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")

    log.info("Report written to %s", output_path)
    return output_path
