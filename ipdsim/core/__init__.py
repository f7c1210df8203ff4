"""Core module for the simulation engine."""

from .config import (
    DEFAULT_SEED,
    DEFAULT_NUM_ROUNDS,
    DEFAULT_FORGIVENESS,
    MIN_NUM_ROUNDS,
    MAX_NUM_ROUNDS,
    MAX_INDEFINITE_ROUNDS,
    SimulationConfig,
)
from .random_source import RandomSource
from .types import (
    Action,
    RoundRecord,
    MatchResult,
    AggregatedStrategyStats,
    RoundRobinResult,
)

__all__ = [
    "DEFAULT_SEED",
    "DEFAULT_NUM_ROUNDS",
    "DEFAULT_FORGIVENESS",
    "MIN_NUM_ROUNDS",
    "MAX_NUM_ROUNDS",
    "MAX_INDEFINITE_ROUNDS",
    "SimulationConfig",
    "RandomSource",
    "Action",
    "RoundRecord",
    "MatchResult",
    "AggregatedStrategyStats",
    "RoundRobinResult",
]
