"""
High-level entry point for drawing precomputed PCA coordinates.

``render_pca`` validates an n×2 matrix of PC1/PC2 coordinates, decides between
a correlation circle (variables) and a scatter plot (individuals), draws it,
shows it, and optionally saves it as a timestamped PNG.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Union

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from pca_plots.config import StyleSpec, resolve_style
from pca_plots.core.errors import PCAPlotError
from pca_plots.core.validation import resolve_labels, validate_matrix
from pca_plots.diagnostics import print_diagnostics, report_unexpected_error
from pca_plots.persistence import save_figure
from pca_plots.renderers import draw_pca


def _display(fig: Figure) -> None:
    # No-op on headless non-GUI backends such as Agg.
    fig.show()


def render_pca(
    matrix: Any,
    labels: Optional[Sequence[str]] = None,
    title: str = "",
    verbose: bool = True,
    save: bool = True,
    output_dir: Union[str, Path] = "pca_plots",
    style: StyleSpec = None,
) -> Figure:
    """Plot PCA results for either variables (correlation circle) or individuals.

    Args:
        matrix: n×2 coordinates, column 1 = PC1 and column 2 = PC2
        labels: Optional labels, one per row (auto-generated if omitted)
        title: Plot title; empty uses the default for the detected plot type
        verbose: Print diagnostic information
        save: Write the figure to ``output_dir`` as a PNG
        output_dir: Directory for saved figures
        style: PlotStyle, config mapping, or path to a YAML/JSON style file

    Returns:
        The rendered matplotlib Figure. The caller owns it.

    Raises:
        PCAPlotError: on invalid matrix or labels. Any other error is
            reported to stdout and re-raised unchanged.
    """
    fig: Optional[Figure] = None
    try:
        coords = validate_matrix(matrix)
        resolved_labels, kind = resolve_labels(coords, labels)
        plot_style = resolve_style(style)

        if verbose:
            print_diagnostics(coords, kind, resolved_labels, output_dir if save else None)

        fig = draw_pca(coords, resolved_labels, kind, title, plot_style)
        _display(fig)

        if save:
            save_figure(
                fig,
                kind,
                coords.shape[0],
                output_dir=output_dir,
                title=title,
                dpi=plot_style.dpi,
                verbose=verbose,
            )
        return fig

    except PCAPlotError:
        raise
    except Exception as exc:
        report_unexpected_error(exc)
        if fig is not None:
            plt.close(fig)
        raise
