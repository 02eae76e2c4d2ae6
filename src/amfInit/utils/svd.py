from typing import Any, Tuple

import numpy as np
import scipy.linalg as linalg
import scipy.sparse as sp
import scipy.sparse.linalg as splinalg


def svd(matrix: Any, rank: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Initialize low-rank factors from a truncated SVD of the matrix.

    Sparse matrices are decomposed with `scipy.sparse.linalg.svds`, which
    requires 0 < rank < min(n_rows, n_cols).

    Args:
        matrix (np.ndarray or sp.spmatrix): Matrix of shape (n_rows, n_cols).
        rank (int): Target rank for the approximation.

    Raises:
        ValueError: If the rank is not supported for the given matrix.

    Returns:
        Tuple[np.ndarray, np.ndarray]:
            - left_factor: shape (n_rows, rank)
            - right_factor: shape (rank, n_cols)
    """
    n_rows, n_cols = matrix.shape
    if sp.issparse(matrix):
        if not 0 < rank < min(n_rows, n_cols):
            raise ValueError(
                f"Sparse SVD requires 0 < rank < {min(n_rows, n_cols)}, got {rank}."
            )
        (
            left_singular_vectors,
            singular_values,
            right_singular_vectors_t,
        ) = splinalg.svds(sp.csr_matrix(matrix, dtype=np.float64), k=rank)
        # svds returns the singular values in ascending order
        order = np.argsort(singular_values)[::-1]
        left_singular_vectors = left_singular_vectors[:, order]
        singular_values = singular_values[order]
        right_singular_vectors_t = right_singular_vectors_t[order, :]
    else:
        if not 0 < rank <= min(n_rows, n_cols):
            raise ValueError(
                f"SVD requires 0 < rank <= {min(n_rows, n_cols)}, got {rank}."
            )
        (
            left_singular_vectors,
            singular_values,
            right_singular_vectors_t,
        ) = linalg.svd(np.asarray(matrix, dtype=np.float64), full_matrices=False)

    left_vectors_truncated = left_singular_vectors[:, :rank]
    singular_values_truncated = singular_values[:rank]
    right_vectors_t_truncated = right_singular_vectors_t[:rank, :]

    left_factor = left_vectors_truncated * np.sqrt(singular_values_truncated[np.newaxis, :])
    right_factor = np.sqrt(singular_values_truncated[:, np.newaxis]) * right_vectors_t_truncated

    return left_factor, right_factor
