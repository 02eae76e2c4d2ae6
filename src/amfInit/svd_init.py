# pylint: disable=C0103
"""
SVD Initialization Module
=========================

Initializes W and H from a truncated singular value decomposition of V:

    W = U_r @ sqrt(S_r),   H = sqrt(S_r) @ Vt_r
"""
from typing import Any, Tuple, Union

import numpy as np

from amfInit.base import Factor, InitializationRule, SeedLike
from amfInit.utils.svd import svd


class SvdInitialization(InitializationRule):
    """
    Deterministic initialization from the leading singular triplets.

    Attributes:
        nonnegative (bool): Whether absolute values of the factors are
            returned, for engines that require nonnegative factors.
    """

    def __init__(self, seed: SeedLike = None, nonnegative: bool = False):
        """
        Initializes the rule.

        Args:
            seed (int or np.random.Generator, optional): Accepted for a uniform
                constructor signature; the decomposition draws no random numbers.
            nonnegative (bool, optional): Return absolute values of the factors.
                Defaults to False.
        """
        super().__init__(seed)
        self.nonnegative = nonnegative

    def initialize(
        self, matrix: Any, rank: int, rng: np.random.Generator = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        self.shape(matrix)
        W, H = svd(matrix, rank)
        if self.nonnegative:
            W, H = np.abs(W), np.abs(H)

        self.logger.debug(
            "Initialized W with shape %s and H with shape %s using truncated SVD",
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
        W, H = self.initialize(matrix, rank, rng)
        return W if factor is Factor.W else H
