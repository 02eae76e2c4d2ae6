# pylint: disable=C0103
"""
Random Initialization Module
============================

Initializes W and H with uniform noise from [0, 1), without looking at the
values of the input matrix.
"""
from typing import Any, Tuple, Union

import numpy as np

from amfInit.base import Factor, InitializationRule


class RandomInitialization(InitializationRule):
    """Uniform random initialization. Only the shape of the matrix is used."""

    def initialize(
        self, matrix: Any, rank: int, rng: np.random.Generator = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        n_rows, n_cols = self.shape(matrix)
        rng = self.generator(rng)

        W = self.uniform(n_rows, rank, rng)
        H = self.uniform(rank, n_cols, rng)

        self.logger.debug(
            "Initialized W with shape %s and H with shape %s with random weights",
            W.shape,
            H.shape,
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
        rng = self.generator(rng)

        if factor is Factor.W:
            M = self.uniform(n_rows, rank, rng)
        else:
            M = self.uniform(rank, n_cols, rng)

        self.logger.debug(
            "Initialized %s with shape %s with random weights", factor.value, M.shape
        )
        return M
