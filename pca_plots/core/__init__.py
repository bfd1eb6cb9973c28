"""
Core components of the PCA plotting package.

This module contains the fundamental building blocks:
- errors: Exception taxonomy for invalid inputs
- plot_types: Plot kind enum and style settings
- validation: Matrix checks, classification and label resolution
"""

from pca_plots.core.errors import (
    PCAPlotError,
    TypeMismatch,
    DimensionError,
    EmptyInputError,
    InvalidValueError,
    LabelCountMismatch,
)
from pca_plots.core.plot_types import PlotKind, PlotStyle
from pca_plots.core.validation import validate_matrix, classify_matrix, resolve_labels

__all__ = [
    "PCAPlotError",
    "TypeMismatch",
    "DimensionError",
    "EmptyInputError",
    "InvalidValueError",
    "LabelCountMismatch",
    "PlotKind",
    "PlotStyle",
    "validate_matrix",
    "classify_matrix",
    "resolve_labels",
]
