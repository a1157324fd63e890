"""Inline figure files as data URIs for the self-contained HTML report."""

import base64
from pathlib import Path

_MIME_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".svg": "image/svg+xml",
}


def embed_figure(fig_path: Path | str) -> str:
    """Return a ``data:{mime};base64,...`` URI for a PNG or SVG file.

    Missing files and other extensions give an empty string so the
    template can simply skip the figure.
    """
    fig_path = Path(fig_path)
    mime = _MIME_TYPES.get(fig_path.suffix.lower())
    if mime is None or not fig_path.exists():
        return ""
    encoded = base64.b64encode(fig_path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{encoded}"
