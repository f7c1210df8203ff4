"""Payoff model and strategy registry."""

from .payoff import PayoffMatrix
from .strategies import (
    Strategy,
    AlwaysCooperate,
    AlwaysDefect,
    TitForTat,
    GrimTrigger,
    GenerousTitForTat,
    STRATEGY_REGISTRY,
    STRATEGY_CODES,
    create_strategy,
    get_strategy_name,
    get_strategy_names,
    list_strategy_codes,
)

__all__ = [
    "PayoffMatrix",
    "Strategy",
    "AlwaysCooperate",
    "AlwaysDefect",
    "TitForTat",
    "GrimTrigger",
    "GenerousTitForTat",
    "STRATEGY_REGISTRY",
    "STRATEGY_CODES",
    "create_strategy",
    "get_strategy_name",
    "get_strategy_names",
    "list_strategy_codes",
]
