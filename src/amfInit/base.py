# pylint: disable=C0103,R0903
"""
Initialization Rule Template for Alternating Matrix Factorization
=================================================================

This module implements the template shared by every initialization rule.
A rule receives the matrix to factorize and a target rank and returns the
starting factor matrices W (n x rank) and H (rank x m).
"""
import abc
import enum
import logging
from typing import Any, Tuple, Union

import numpy as np
import scipy.sparse as sp

SeedLike = Union[None, int, np.random.Generator]


class InvalidSelectorError(ValueError):
    """Raised when the factor selector is neither W nor H."""


class Factor(enum.Enum):
    """
    Selects which factor matrix a single-matrix initialization produces.

    Attributes:
        W: The left factor, shape (n, rank).
        H: The right factor, shape (rank, m).
    """

    W = "W"
    H = "H"

    @classmethod
    def parse(cls, value: Union["Factor", str]) -> "Factor":
        """
        Convert a selector into a Factor member.

        Args:
            value (Factor or str): A Factor, or the case-insensitive character
                'W' or 'H'.

        Raises:
            InvalidSelectorError: If the value does not designate W or H.

        Returns:
            Factor: The selected factor.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in ("W", "H"):
            return cls(value.upper())
        raise InvalidSelectorError(
            "Specify either 'H' or 'W' when initializing one of W and H "
            f"matrices! Got {value!r}."
        )


class InitializationRule(metaclass=abc.ABCMeta):
    """
    Produces the starting point of an alternating matrix factorization.

    Subclasses share the same contract so that the factorization engine can
    swap them at configuration time.

    Attributes:
        rng (np.random.Generator): Random source used when a call does not
            provide its own.
        logger (logging.Logger): Logger instance for debugging and monitoring.
    """

    def __init__(self, seed: SeedLike = None):
        """
        Initializes the rule.

        Args:
            seed (int or np.random.Generator, optional): Seed or generator for
                reproducible random initialization. Defaults to None, which
                draws fresh entropy from the operating system.
        """
        self.rng = np.random.default_rng(seed)
        self.logger = logging.getLogger(self.__class__.__name__)

    @abc.abstractmethod
    def initialize(
        self, matrix: Any, rank: int, rng: np.random.Generator = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Initialize both factor matrices.

        Args:
            matrix (np.ndarray or sp.spmatrix): Input matrix of shape (n, m).
            rank (int): Rank of the factorization.
            rng (np.random.Generator, optional): Random source overriding the
                rule's own generator for this call.

        Returns:
            Tuple[np.ndarray, np.ndarray]:
                - W: shape (n, rank)
                - H: shape (rank, m)
        """
        raise NotImplementedError

    @abc.abstractmethod
    def initialize_one(
        self,
        matrix: Any,
        rank: int,
        which: Union[Factor, str],
        rng: np.random.Generator = None,
    ) -> np.ndarray:
        """
        Initialize only one of the factor matrices.

        Args:
            matrix (np.ndarray or sp.spmatrix): Input matrix of shape (n, m).
            rank (int): Rank of the factorization.
            which (Factor or str): Factor to initialize.
            rng (np.random.Generator, optional): Random source overriding the
                rule's own generator for this call.

        Raises:
            InvalidSelectorError: If `which` designates neither W nor H.

        Returns:
            np.ndarray: W with shape (n, rank) or H with shape (rank, m).
        """
        raise NotImplementedError

    def serialize(self, archive: Any, version: int = 0):
        """
        Persistence hook. Rules hold no state worth saving, so nothing is
        written to `archive`.
        """

    def generator(self, rng: np.random.Generator = None) -> np.random.Generator:
        """Return the random source for a call."""
        return self.rng if rng is None else rng

    @staticmethod
    def shape(matrix: Any) -> Tuple[int, int]:
        """
        Size query for dense or sparse matrices.

        Args:
            matrix (np.ndarray or sp.spmatrix): Input matrix.

        Raises:
            TypeError: If the input is not two-dimensional.

        Returns:
            Tuple[int, int]: (n_rows, n_cols).
        """
        if not sp.issparse(matrix):
            matrix = np.asarray(matrix)
        if matrix.ndim != 2:
            raise TypeError(
                f"Expected a two-dimensional matrix, got {matrix.ndim} dimension(s)."
            )
        n_rows, n_cols = matrix.shape
        return int(n_rows), int(n_cols)

    @staticmethod
    def uniform(n_rows: int, n_cols: int, rng: np.random.Generator) -> np.ndarray:
        """Draw a (n_rows, n_cols) matrix uniformly from [0, 1)."""
        return rng.random((n_rows, n_cols))
