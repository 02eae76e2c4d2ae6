"""
Statistics Module
=================

Single-pass statistics of a dense or sparse matrix, and the scalar offset
derived from them by the average initialization rule.
"""
from dataclasses import dataclass
from typing import Any

import numpy as np
import scipy.sparse as sp


@dataclass
class MatrixStatistics:
    """
    Stores the result of scanning a matrix.

    Attributes:
        total (float): Sum of the visited values.
        minimum (float): Smallest visited value, `np.inf` if nothing was visited.
        count (int): Number of visited values. For sparse matrices only the
            stored nonzero entries are visited.
        n_rows (int): Number of rows of the matrix.
        n_cols (int): Number of columns of the matrix.
    """

    total: float
    minimum: float
    count: int
    n_rows: int
    n_cols: int

    @property
    def mean(self) -> float:
        """
        Average over the full n x m grid.

        The denominator is n * m whatever the number of visited values, so
        the mean of a sparse matrix counts its implicit entries as zeros.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.total) / np.float64(self.n_rows * self.n_cols))


def _values(matrix: Any) -> np.ndarray:
    """Values visited by the scan, without densifying sparse input."""
    if sp.issparse(matrix):
        stored = sp.csr_matrix(matrix, dtype=np.float64, copy=True)
        stored.sum_duplicates()
        stored.eliminate_zeros()
        return stored.data
    return np.asarray(matrix, dtype=np.float64).ravel()


def scan(matrix: Any) -> MatrixStatistics:
    """
    Accumulate the sum and the minimum of a matrix in one pass.

    Dense matrices contribute all of their n * m entries. Sparse matrices
    only contribute their stored nonzero entries.

    Args:
        matrix (np.ndarray or sp.spmatrix): Matrix of shape (n_rows, n_cols).

    Returns:
        MatrixStatistics: The accumulated statistics.
    """
    if not sp.issparse(matrix):
        matrix = np.asarray(matrix, dtype=np.float64)
    n_rows, n_cols = matrix.shape
    values = _values(matrix)
    minimum = float(values.min()) if values.size else np.inf
    return MatrixStatistics(
        total=float(values.sum()),
        minimum=minimum,
        count=int(values.size),
        n_rows=int(n_rows),
        n_cols=int(n_cols),
    )


def average_seed(stats: MatrixStatistics, rank: int) -> float:
    """
    Offset added to the uniform noise of the average initialization:

        seed = sqrt((mean - minimum) / rank)

    No guard is applied. A negative radicand, a zero rank or a matrix
    without visited values yields NaN or inf.

    Args:
        stats (MatrixStatistics): Statistics returned by `scan`.
        rank (int): Rank of the factorization.

    Returns:
        float: The seed value.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        radicand = np.float64(stats.mean - stats.minimum) / np.float64(rank)
        return float(np.sqrt(radicand))
