"""Exceptions raised while validating PCA plot inputs.

Every validation failure derives from :class:`PCAPlotError` and also from the
matching builtin (``TypeError`` or ``ValueError``), so callers can catch either.
Anything else raised during rendering is treated as an unexpected error and
re-raised unchanged.
"""

from typing import List, Optional, Tuple


class PCAPlotError(Exception):
    """Base class for input errors detected by the PCA plotter."""


class TypeMismatch(PCAPlotError, TypeError):
    """Matrix is not a 2-D numeric container, or labels are not a string sequence."""


class DimensionError(PCAPlotError, ValueError):
    """Matrix does not have exactly two columns (PC1 and PC2)."""


class EmptyInputError(PCAPlotError, ValueError):
    """Matrix has no rows."""


class InvalidValueError(PCAPlotError, ValueError):
    """Matrix contains NaN or infinite entries.

    Attributes:
        kind: ``"nan"`` or ``"inf"``
        positions: (row, column) indices of the offending entries
    """

    def __init__(self, message: str, kind: str, positions: Optional[List[Tuple[int, int]]] = None):
        super().__init__(message)
        self.kind = kind
        self.positions = list(positions or [])


class LabelCountMismatch(PCAPlotError, ValueError):
    """Number of supplied labels differs from the number of matrix rows."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
