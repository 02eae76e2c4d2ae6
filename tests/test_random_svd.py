from typing import Tuple

import numpy as np
import pytest
import scipy.sparse as sp
from numpy.typing import NDArray

from amfInit import Factor, InvalidSelectorError, RandomInitialization, SvdInitialization

Matrix = NDArray[np.float64]


def test_random_initialization_ignores_values(rank2_case: Tuple[Matrix, int]):
    """Ensure the uniform rule only depends on the shape of the matrix."""
    R, rank = rank2_case
    W1, H1 = RandomInitialization(seed=0).initialize(R, rank)
    W2, H2 = RandomInitialization(seed=0).initialize(sp.csr_matrix(R * 100), rank)

    assert W1.shape == (4, rank)
    assert H1.shape == (rank, 5)
    assert np.array_equal(W1, W2)
    assert np.array_equal(H1, H2)
    assert np.all((W1 >= 0) & (W1 < 1))
    assert np.all((H1 >= 0) & (H1 < 1))


def test_random_initialize_one(rank2_case: Tuple[Matrix, int]):
    """Ensure single-matrix initialization honours the selector."""
    R, rank = rank2_case
    rule = RandomInitialization(seed=0)

    assert rule.initialize_one(R, rank, "h").shape == (rank, 5)
    assert rule.initialize_one(R, rank, Factor.W).shape == (4, rank)
    with pytest.raises(InvalidSelectorError):
        rule.initialize_one(R, rank, "Q")


def test_svd_recovers_rank2_matrix(rank2_case: Tuple[Matrix, int]):
    """Ensure the SVD factors reproduce an exactly rank-2 matrix.

    Args:
        rank2_case: Fixture providing (matrix, rank).
    """
    R, rank = rank2_case
    W, H = SvdInitialization().initialize(R, rank)

    assert W.shape == (4, rank)
    assert H.shape == (rank, 5)
    assert np.allclose(W @ H, R, atol=1e-8), f"pred=\n{W @ H}\ntruth=\n{R}"


def test_sparse_svd_recovers_rank2_matrix(rank2_case: Tuple[Matrix, int]):
    """Ensure the sparse path agrees with the dense reconstruction."""
    R, rank = rank2_case
    W, H = SvdInitialization().initialize(sp.csr_matrix(R), rank)

    assert W.shape == (4, rank)
    assert H.shape == (rank, 5)
    assert np.allclose(W @ H, R, atol=1e-6), f"pred=\n{W @ H}\ntruth=\n{R}"


def test_svd_nonnegative(rank2_case: Tuple[Matrix, int]):
    """Ensure the nonnegative flag returns absolute values."""
    R, rank = rank2_case
    W, H = SvdInitialization(nonnegative=True).initialize(R, rank)
    assert np.all(W >= 0)
    assert np.all(H >= 0)


def test_svd_initialize_one(rank2_case: Tuple[Matrix, int]):
    """Ensure the single factors match the joint decomposition."""
    R, rank = rank2_case
    rule = SvdInitialization()
    W, H = rule.initialize(R, rank)

    assert np.allclose(rule.initialize_one(R, rank, "W"), W)
    assert np.allclose(rule.initialize_one(R, rank, Factor.H), H)


@pytest.mark.parametrize("rank", [0, 5])
def test_svd_invalid_rank(rank2_case: Tuple[Matrix, int], rank: int):
    """Ensure unsupported ranks are rejected."""
    R, _ = rank2_case
    with pytest.raises(ValueError):
        SvdInitialization().initialize(R, rank)


def test_sparse_svd_rank_must_be_below_min_dimension(rank2_case: Tuple[Matrix, int]):
    """Ensure svds constraints are reported as a ValueError."""
    R, _ = rank2_case
    with pytest.raises(ValueError):
        SvdInitialization().initialize(sp.csr_matrix(R), 4)
