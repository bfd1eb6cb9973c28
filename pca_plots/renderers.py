from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from pca_plots.core.plot_types import PlotKind, PlotStyle

__all__ = [
    "plot_correlation_circle",
    "plot_individuals",
    "draw_pca",
]


def _plot_reference_lines(ax, style: PlotStyle):
    ax.axhline(0, color=style.reference_color, linestyle="--", linewidth=style.reference_linewidth)
    ax.axvline(0, color=style.reference_color, linestyle="--", linewidth=style.reference_linewidth)


def _finish_axes(ax, title: str):
    ax.set_xlabel("PC1")
    ax.set_ylabel("PC2")
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="box")


def _plot_unit_circle(ax, style: PlotStyle):
    theta = np.linspace(0.0, 2.0 * np.pi, style.circle_resolution)
    ax.plot(np.cos(theta), np.sin(theta), color=style.circle_color, linewidth=style.circle_linewidth)


def plot_correlation_circle(ax, matrix: np.ndarray, labels: Sequence[str], title: str, style: PlotStyle):
    """Draw loadings as arrows from the origin inside the unit circle."""
    _plot_unit_circle(ax, style)
    _plot_reference_lines(ax, style)

    for (x, y), label in zip(matrix, labels):
        ax.arrow(
            0.0, 0.0, x, y,
            width=0.0,
            linewidth=style.arrow_linewidth,
            head_width=style.arrow_head_width,
            head_length=style.arrow_head_width,
            length_includes_head=True,
            fc=style.arrow_color,
            ec=style.arrow_color,
        )
        ax.text(
            x * style.label_scale,
            y * style.label_scale,
            label,
            color=style.arrow_color,
            fontsize=style.variable_fontsize,
            ha="center",
            va="center",
        )

    ax.set_xlim(-style.circle_limit, style.circle_limit)
    ax.set_ylim(-style.circle_limit, style.circle_limit)
    _finish_axes(ax, title)


def plot_individuals(ax, matrix: np.ndarray, labels: Sequence[str], title: str, style: PlotStyle):
    """Draw scores as labelled markers with padded, per-axis limits."""
    ax.scatter(matrix[:, 0], matrix[:, 1], s=style.marker_size ** 2, c=style.marker_color)
    _plot_reference_lines(ax, style)

    for (x, y), label in zip(matrix, labels):
        ax.text(
            x,
            y + style.label_offset,
            label,
            color=style.individual_label_color,
            fontsize=style.individual_fontsize,
            ha="center",
            va="center",
        )

    pad = style.axis_padding
    ax.set_xlim(matrix[:, 0].min() - pad, matrix[:, 0].max() + pad)
    ax.set_ylim(matrix[:, 1].min() - pad, matrix[:, 1].max() + pad)
    _finish_axes(ax, title)


def draw_pca(matrix: np.ndarray, labels: Sequence[str], kind: PlotKind, title: str, style: PlotStyle):
    """Create a figure and draw the layout matching ``kind`` on it.

    Args:
        matrix: Validated (n, 2) coordinates
        labels: One label per row
        kind: Detected plot kind
        title: Plot title; empty selects the default for ``kind``
        style: Cosmetic settings

    Returns:
        The new matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=style.figsize)
    title = title or kind.default_title
    try:
        if kind is PlotKind.VARIABLES:
            plot_correlation_circle(ax, matrix, labels, title, style)
        else:
            plot_individuals(ax, matrix, labels, title, style)
    except Exception:
        plt.close(fig)
        raise
    return fig
