"""Helpers shared by the initialization rules."""

from amfInit.utils.statistics import MatrixStatistics, average_seed, scan
from amfInit.utils.svd import svd

__all__ = ["MatrixStatistics", "average_seed", "scan", "svd"]
