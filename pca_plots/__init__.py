"""
PCA Plots - Correlation circles and individuals maps from precomputed PCA coordinates

Draws an n×2 matrix of PC1/PC2 coordinates either as a correlation circle
(every entry within [-1, 1], read as variable loadings) or as a labelled
scatter of individuals (scores), with input validation and optional PNG output.

Quick Start:
    >>> import numpy as np
    >>> from pca_plots import render_pca
    >>>
    >>> # Loadings -> correlation circle with labels X1, X2
    >>> fig = render_pca(np.array([[0.8, 0.5], [0.5, 0.7]]), save=False)
    >>>
    >>> # Scores -> individuals scatter saved under pca_plots/
    >>> fig = render_pca([[1.2, 0.5], [0.8, 1.0]], labels=["A", "B"], title="My samples")

Main Components:
    - core.validation: Matrix checks, plot kind detection, label resolution
    - core.errors: Exceptions raised for invalid inputs
    - renderers: Correlation circle and individuals scatter layouts
    - persistence: Timestamped PNG output
    - config: Plot style loading from YAML/JSON
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from pca_plots.core import (
    PCAPlotError,
    TypeMismatch,
    DimensionError,
    EmptyInputError,
    InvalidValueError,
    LabelCountMismatch,
    PlotKind,
    PlotStyle,
    validate_matrix,
    classify_matrix,
    resolve_labels,
)
from pca_plots.config import load_style
from pca_plots.plotting import render_pca

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",

    # Entry point
    "render_pca",

    # Validation
    "validate_matrix",
    "classify_matrix",
    "resolve_labels",

    # Types and configuration
    "PlotKind",
    "PlotStyle",
    "load_style",

    # Errors
    "PCAPlotError",
    "TypeMismatch",
    "DimensionError",
    "EmptyInputError",
    "InvalidValueError",
    "LabelCountMismatch",
]
