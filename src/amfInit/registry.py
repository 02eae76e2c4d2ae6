"""
Registry Module
===============

Selects an initialization rule by name, so the factorization engine can be
configured with a plain string.
"""
from typing import Dict, List, Type

from amfInit.average import AverageInitialization
from amfInit.base import InitializationRule
from amfInit.random_init import RandomInitialization
from amfInit.svd_init import SvdInitialization

_RULES: Dict[str, Type[InitializationRule]] = {
    "average": AverageInitialization,
    "random": RandomInitialization,
    "svd": SvdInitialization,
}

_ALIASES: Dict[str, str] = {
    "average": "average",
    "avg": "average",
    "mean": "average",
    "random": "random",
    "randu": "random",
    "uniform": "random",
    "svd": "svd",
}


def available_initializations() -> List[str]:
    """Canonical names accepted by `get_initialization`."""
    return sorted(_RULES)


def get_initialization(name: str, **kwargs) -> InitializationRule:
    """
    Build the initialization rule registered under `name`.

    Args:
        name (str): Case-insensitive rule name or alias.
        **kwargs: Keyword arguments forwarded to the rule constructor.

    Raises:
        ValueError: If the name is unknown or not a string.

    Returns:
        InitializationRule: A new rule instance.
    """
    key = name.strip().lower() if isinstance(name, str) else None
    if key not in _ALIASES:
        raise ValueError(
            f"Unknown initialization {name!r}; expected one of "
            f"{', '.join(available_initializations())} (recognizes common aliases)."
        )
    return _RULES[_ALIASES[key]](**kwargs)
