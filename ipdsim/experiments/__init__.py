"""Tournaments over the strategy set."""

from .tournament import (
    TournamentConfig,
    TournamentRunner,
    results_to_dict,
    standings_to_dataframe,
    rounds_to_dataframe,
    create_tournament,
)

__all__ = [
    "TournamentConfig",
    "TournamentRunner",
    "results_to_dict",
    "standings_to_dataframe",
    "rounds_to_dataframe",
    "create_tournament",
]
