"""Iterated Prisoner's Dilemma simulation engine.

Deterministic, seeded simulation of classic strategies in pairwise matches
and round-robin tournaments.
"""

from .core import (
    DEFAULT_SEED,
    DEFAULT_NUM_ROUNDS,
    DEFAULT_FORGIVENESS,
    MAX_NUM_ROUNDS,
    MAX_INDEFINITE_ROUNDS,
    SimulationConfig,
    RandomSource,
    Action,
    RoundRecord,
    MatchResult,
    AggregatedStrategyStats,
    RoundRobinResult,
)
from .games import (
    PayoffMatrix,
    Strategy,
    STRATEGY_CODES,
    create_strategy,
    get_strategy_name,
    get_strategy_names,
    list_strategy_codes,
)
from .engine import MatchEngine
from .experiments import (
    TournamentConfig,
    TournamentRunner,
    results_to_dict,
    standings_to_dataframe,
    rounds_to_dataframe,
    create_tournament,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "DEFAULT_SEED",
    "DEFAULT_NUM_ROUNDS",
    "DEFAULT_FORGIVENESS",
    "MAX_NUM_ROUNDS",
    "MAX_INDEFINITE_ROUNDS",
    "SimulationConfig",
    # Types
    "RandomSource",
    "Action",
    "RoundRecord",
    "MatchResult",
    "AggregatedStrategyStats",
    "RoundRobinResult",
    # Games
    "PayoffMatrix",
    "Strategy",
    "STRATEGY_CODES",
    "create_strategy",
    "get_strategy_name",
    "get_strategy_names",
    "list_strategy_codes",
    # Engine
    "MatchEngine",
    # Tournaments
    "TournamentConfig",
    "TournamentRunner",
    "results_to_dict",
    "standings_to_dataframe",
    "rounds_to_dataframe",
    "create_tournament",
]
