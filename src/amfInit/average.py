# pylint: disable=C0103
"""
Average Initialization Module
=============================

This module implements the average initialization rule. W and H are set to
the root of the average of V, perturbed with uniform noise from [0, 1). The
lowest element of V is subtracted from the average before dividing it by
the factorization rank:

    seed = sqrt((sum(V) / (n * m) - min(V)) / rank)

For sparse matrices only the stored nonzero entries are visited, while the
average is still taken over all n * m positions.
"""
from typing import Any, Tuple, Union

import numpy as np

from amfInit.base import Factor, InitializationRule
from amfInit.utils.statistics import average_seed, scan


class AverageInitialization(InitializationRule):
    """
    Initializes the factor matrices around a scale derived from the data.

    Every produced entry lies in [seed, seed + 1).
    """

    def compute_seed(self, matrix: Any, rank: int) -> float:
        """
        Scan the matrix once and derive the offset.

        A non-finite result is reported and returned as is.

        Args:
            matrix (np.ndarray or sp.spmatrix): Input matrix of shape (n, m).
            rank (int): Rank of the factorization.

        Returns:
            float: The offset added to the uniform noise.
        """
        stats = scan(matrix)
        seed = average_seed(stats, rank)
        self.logger.debug(
            "Scanned %s values of a %sx%s matrix: total=%s, minimum=%s, seed=%s",
            stats.count,
            stats.n_rows,
            stats.n_cols,
            stats.total,
            stats.minimum,
            seed,
        )
        if not np.isfinite(seed):
            self.logger.warning(
                "Average seed is not finite (mean=%s, minimum=%s, rank=%s); "
                "it is propagated into the factor matrices.",
                stats.mean,
                stats.minimum,
                rank,
            )
        return seed

    def initialize(
        self, matrix: Any, rank: int, rng: np.random.Generator = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        n_rows, n_cols = self.shape(matrix)
        seed = self.compute_seed(matrix, rank)
        rng = self.generator(rng)

        W = self.uniform(n_rows, rank, rng) + seed
        H = self.uniform(rank, n_cols, rng) + seed

        self.logger.debug(
            "Initialized W with shape %s and H with shape %s around %s",
            W.shape,
            H.shape,
            seed,
        )
        return W, H

    def initialize_one(
        self,
        matrix: Any,
        rank: int,
        which: Union[Factor, str],
        rng: np.random.Generator = None,
    ) -> np.ndarray:
        factor = Factor.parse(which)
        n_rows, n_cols = self.shape(matrix)
        seed = self.compute_seed(matrix, rank)
        rng = self.generator(rng)

        if factor is Factor.W:
            M = self.uniform(n_rows, rank, rng) + seed
        else:
            M = self.uniform(rank, n_cols, rng) + seed

        self.logger.debug(
            "Initialized %s with shape %s around %s", factor.value, M.shape, seed
        )
        return M
