"""Input checks and label resolution for PCA coordinate matrices."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from pca_plots.core.errors import (
    DimensionError,
    EmptyInputError,
    InvalidValueError,
    LabelCountMismatch,
    TypeMismatch,
)
from pca_plots.core.plot_types import PlotKind

__all__ = [
    "validate_matrix",
    "classify_matrix",
    "resolve_labels",
]

# Loadings of standardized variables are correlations, bounded by 1 in magnitude.
CORRELATION_BOUND = 1.0


def _as_array(matrix: Any) -> np.ndarray:
    if isinstance(matrix, pd.DataFrame):
        if not matrix.empty:
            non_numeric = [
                str(col) for col, dtype in matrix.dtypes.items()
                if not pd.api.types.is_numeric_dtype(dtype)
            ]
            if non_numeric:
                raise TypeMismatch(
                    f"Expected numeric PC columns, but columns {non_numeric} are not numeric."
                )
        return matrix.to_numpy(dtype=np.float64)

    if isinstance(matrix, (str, bytes)):
        raise TypeMismatch(
            f"Expected a matrix, but got {type(matrix).__name__}.\n"
            "Please provide a 2D array/matrix with 2 columns (PC1 and PC2)."
        )
    try:
        array = np.asarray(matrix)
    except (TypeError, ValueError) as exc:
        raise TypeMismatch(
            f"Expected a matrix, but got {type(matrix).__name__} that cannot be read as a 2D array."
        ) from exc

    if array.ndim != 2:
        raise TypeMismatch(
            f"Expected a matrix, but got {type(matrix).__name__} with {array.ndim} dimension(s).\n"
            "Please provide a 2D array/matrix with 2 columns (PC1 and PC2)."
        )
    if array.dtype.kind not in "biuf":
        raise TypeMismatch(f"Expected numeric matrix entries, but got dtype '{array.dtype}'.")
    return array


def _positions(mask: np.ndarray) -> List[Tuple[int, int]]:
    return [(int(row), int(col)) for row, col in np.argwhere(mask)]


def validate_matrix(matrix: Any) -> np.ndarray:
    """Check a PC1/PC2 coordinate matrix and return it as float64.

    Checks run in a fixed order and stop at the first failure:
    type, column count, row count, NaN, Inf.

    Args:
        matrix: n×2 numeric container (ndarray, nested lists, DataFrame)

    Returns:
        Validated (n, 2) float64 array

    Raises:
        TypeMismatch: input is not a 2D numeric container
        DimensionError: input does not have exactly 2 columns
        EmptyInputError: input has no rows
        InvalidValueError: input contains NaN or infinite values
    """
    array = _as_array(matrix)
    n, m = array.shape

    if m != 2:
        raise DimensionError(
            "Matrix must have exactly 2 columns (PC1 and PC2).\n"
            f"Your matrix has dimensions: {n} rows × {m} columns."
        )
    if n == 0:
        raise EmptyInputError(
            "Matrix has 0 rows. Please provide a matrix with at least 1 data point."
        )

    values = array.astype(np.float64)

    nan_mask = np.isnan(values)
    if nan_mask.any():
        positions = _positions(nan_mask)
        raise InvalidValueError(
            f"Matrix contains NaN values at positions: {positions}\n"
            "Please remove or replace NaN values before plotting.",
            kind="nan",
            positions=positions,
        )

    inf_mask = np.isinf(values)
    if inf_mask.any():
        positions = _positions(inf_mask)
        raise InvalidValueError(
            f"Matrix contains Inf values at positions: {positions}\n"
            "Please remove or replace Inf values before plotting.",
            kind="inf",
            positions=positions,
        )

    return values


def classify_matrix(matrix: np.ndarray) -> PlotKind:
    """Variables if every entry lies within [-1, 1], individuals otherwise.

    Small-valued individual scores (including an all-zero matrix) are
    classified as variables.
    """
    if np.all(np.abs(matrix) <= CORRELATION_BOUND):
        return PlotKind.VARIABLES
    return PlotKind.INDIVIDUALS


def _check_labels(labels: Any) -> List[str]:
    ordered = isinstance(labels, (Sequence, np.ndarray, pd.Series, pd.Index))
    if isinstance(labels, (str, bytes)) or not ordered:
        raise TypeMismatch(
            f"labels must be an ordered sequence of strings, got {type(labels).__name__}.\n"
            'Example: labels=["Sample1", "Sample2", "Sample3"]'
        )
    if isinstance(labels, np.ndarray) and labels.ndim != 1:
        raise TypeMismatch(f"labels must be one-dimensional, got {labels.ndim} dimensions.")

    items = list(labels)
    bad = sorted({type(item).__name__ for item in items if not isinstance(item, str)})
    if bad:
        raise TypeMismatch(f"labels must all be strings, found items of type {bad}.")
    return [str(item) for item in items]


def resolve_labels(
    matrix: np.ndarray,
    labels: Optional[Any] = None,
) -> Tuple[List[str], PlotKind]:
    """Return one label per row together with the detected plot kind.

    Args:
        matrix: Validated (n, 2) coordinate matrix
        labels: Optional caller-supplied labels, in row order

    Returns:
        Tuple of (labels, kind). Missing labels are generated as
        ``X1..Xn`` for variables and ``Ind1..Indn`` for individuals.
    """
    kind = classify_matrix(matrix)
    n = matrix.shape[0]

    if labels is None:
        return [f"{kind.label_prefix}{i}" for i in range(1, n + 1)], kind

    resolved = _check_labels(labels)
    if len(resolved) != n:
        raise LabelCountMismatch(
            f"Number of labels ({len(resolved)}) doesn't match number of rows ({n}).\n"
            f"Please provide exactly {n} labels, one for each row in your matrix.",
            expected=n,
            actual=len(resolved),
        )
    return resolved, kind
