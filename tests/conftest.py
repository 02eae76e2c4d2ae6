from typing import Tuple

import numpy as np
import pytest
import scipy.sparse as sp
from numpy.typing import NDArray

Matrix = NDArray[np.float64]


@pytest.fixture
def dense_case() -> Tuple[Matrix, int, float]:
    """Provide the 2x2 dense baseline.

    sum=10, mean=2.5, min=1, so with rank 1 the seed is sqrt(1.5).

    Returns:
        Tuple[Matrix, int, float]: (matrix, rank, expected seed).
    """
    V = np.array(
        [
            [1.0, 2.0],
            [3.0, 4.0],
        ]
    )
    return V, 1, np.sqrt(1.5)


@pytest.fixture
def sparse_diagonal_case() -> Tuple[sp.csr_matrix, int]:
    """Provide a 3x3 sparse matrix storing only its diagonal {2, 4, 6}.

    sum=12 over 9 positions gives mean=4/3 which is below min=2.

    Returns:
        Tuple[sp.csr_matrix, int]: (matrix, rank).
    """
    V = sp.csr_matrix(
        (np.array([2.0, 4.0, 6.0]), (np.array([0, 1, 2]), np.array([0, 1, 2]))),
        shape=(3, 3),
    )
    return V, 1


@pytest.fixture
def sparse_signed_case() -> Tuple[sp.csr_matrix, int, float]:
    """Provide a 4x5 sparse matrix with a negative stored entry.

    Stored values {-2, 1, 3, 6}: sum=8, mean=8/20=0.4, min=-2, so with
    rank 2 the seed is sqrt(1.2).

    Returns:
        Tuple[sp.csr_matrix, int, float]: (matrix, rank, expected seed).
    """
    V = sp.csr_matrix(
        (
            np.array([-2.0, 1.0, 3.0, 6.0]),
            (np.array([0, 1, 2, 3]), np.array([4, 0, 2, 3])),
        ),
        shape=(4, 5),
    )
    return V, 2, np.sqrt(1.2)


@pytest.fixture
def rank2_case() -> Tuple[Matrix, int]:
    """Provide the rank-2 reconstruction toy problem.

    Returns:
        Tuple[Matrix, int]: (matrix, rank).
    """
    h1_true = np.array(
        [
            [1.0, 0.0],
            [2.0, 1.0],
            [0.0, 1.0],
            [1.0, 1.0],
        ]
    )  # (4, 2)

    h2_true = np.array(
        [
            [1.0, 0.0, 2.0, 1.0, 0.0],
            [0.0, 1.0, 1.0, 2.0, 3.0],
        ]
    )  # (2, 5)

    return h1_true @ h2_true, 2
