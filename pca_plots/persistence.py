"""Saving rendered PCA figures to timestamped PNG files."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from matplotlib.figure import Figure

from pca_plots.core.plot_types import PlotKind

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def sanitize_title(title: str) -> str:
    """Lowercase file stem from a title: word chars, hyphens and underscores only."""
    cleaned = re.sub(r"[^\w\s-]", "", title)
    cleaned = re.sub(r"\s+", "_", cleaned.strip())
    return cleaned.lower()


def build_filename(kind: PlotKind, n_points: int, title: str = "", timestamp: Optional[str] = None) -> str:
    """``<base>_<n>pts_<YYYYmmdd_HHMMSS>.png`` where base comes from the title or the plot kind."""
    base_name = sanitize_title(title) if title else ""
    if not base_name:
        base_name = kind.default_basename
    if timestamp is None:
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    return f"{base_name}_{n_points}pts_{timestamp}.png"


def save_figure(
    fig: Figure,
    kind: PlotKind,
    n_points: int,
    *,
    output_dir: Union[str, Path] = "pca_plots",
    title: str = "",
    dpi: int = 300,
    timestamp: Optional[str] = None,
    verbose: bool = False,
) -> Path:
    """Write ``fig`` under ``output_dir``, creating the directory if needed.

    The figure is left open; the caller still owns it.

    Returns:
        Path of the written PNG
    """
    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        output_dir.mkdir(parents=True, exist_ok=True)
        if verbose:
            print(f"Created directory: {output_dir}")

    filepath = output_dir / build_filename(kind, n_points, title=title, timestamp=timestamp)
    fig.savefig(filepath, dpi=dpi, bbox_inches="tight")
    if verbose:
        print(f"\n✓ Plot saved to: {filepath}")
    return filepath
