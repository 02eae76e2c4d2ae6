"""Initialization rules for alternating matrix factorization."""

from amfInit.average import AverageInitialization
from amfInit.base import Factor, InitializationRule, InvalidSelectorError
from amfInit.random_init import RandomInitialization
from amfInit.registry import available_initializations, get_initialization
from amfInit.svd_init import SvdInitialization

__all__ = [
    "AverageInitialization",
    "Factor",
    "InitializationRule",
    "InvalidSelectorError",
    "RandomInitialization",
    "SvdInitialization",
    "available_initializations",
    "get_initialization",
]
