"""Console reports printed by render_pca."""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from pca_plots.core.plot_types import PlotKind

BANNER = "=" * 60


def _range(column: np.ndarray) -> str:
    return f"[{float(column.min())}, {float(column.max())}]"


def print_diagnostics(
    matrix: np.ndarray,
    kind: PlotKind,
    labels: Sequence[str],
    output_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Print matrix shape, detected plot kind, PC ranges and labels.

    ``output_dir`` is only reported when the plot is going to be saved.
    """
    n, m = matrix.shape
    print(BANNER)
    print("PCA PLOT DIAGNOSTICS")
    print(BANNER)
    print(f"Matrix dimensions: {n} × {m}")
    print(f"Plot type detected: {kind.value}")
    print(f"PC1 range: {_range(matrix[:, 0])}")
    print(f"PC2 range: {_range(matrix[:, 1])}")
    print(f"Labels: {list(labels)}")
    if output_dir is not None:
        print(f"Output directory: {output_dir}")
    print(BANNER)


def report_unexpected_error(exc: BaseException, where: str = "render_pca()") -> None:
    """Print type, message and stack trace of an error that was not a validation failure."""
    print("\n" + BANNER)
    print(f"UNEXPECTED ERROR occurred in {where}")
    print(BANNER)
    print(f"Error type: {type(exc).__name__}")
    print(f"Error message: {exc}")
    print("\nStack trace:")
    print("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip())
    print(BANNER)
