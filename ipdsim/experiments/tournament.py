"""Tournament infrastructure for strategy competitions.

Supports a single pairwise match and a round-robin over the full strategy
set (every distinct pair once, then every strategy against itself), with
per-strategy aggregation and exports for reporting.
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import numpy as np
import polars as pl

from ..core.config import (
    DEFAULT_NUM_ROUNDS,
    DEFAULT_SEED,
    MAX_INDEFINITE_ROUNDS,
    SimulationConfig,
)
from ..core.random_source import RandomSource
from ..core.types import AggregatedStrategyStats, MatchResult, RoundRobinResult
from ..engine.match import MatchEngine
from ..games.payoff import PayoffMatrix
from ..games.strategies import STRATEGY_CODES, create_strategy, get_strategy_name

logger = logging.getLogger(__name__)


@dataclass
class TournamentConfig:
    """Configuration for a tournament run."""
    payoff_matrix: PayoffMatrix = field(default_factory=PayoffMatrix)
    seed: int = DEFAULT_SEED
    num_rounds: Optional[int] = DEFAULT_NUM_ROUNDS
    continuation_prob: Optional[float] = None  # set for indefinite horizon
    strategy_params: Dict[str, Any] = field(default_factory=dict)
    max_rounds: int = MAX_INDEFINITE_ROUNDS

    @classmethod
    def from_simulation_config(cls, config: SimulationConfig) -> "TournamentConfig":
        return cls(
            payoff_matrix=config.payoff_matrix(),
            seed=config.seed,
            num_rounds=None if config.is_indefinite else config.num_rounds,
            continuation_prob=config.continuation_prob,
            strategy_params=config.strategy_params(),
        )


class TournamentRunner:
    """Runs pairwise and round-robin tournaments.

    All matches of a run share one RandomSource and execute sequentially in a
    fixed order, so a run is fully determined by its configuration.
    """

    def __init__(
        self,
        config: TournamentConfig,
        rng: Optional[RandomSource] = None,
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ):
        """Initialize tournament runner.

        Args:
            config: Tournament configuration
            rng: Random source to consume (created if omitted). It is reset
                to config.seed at the start of every run.
            progress_callback: Optional callback(completed, total, message)
        """
        self.config = config
        self.rng = rng if rng is not None else RandomSource(config.seed)
        self.progress_callback = progress_callback
        self.match_results: List[MatchResult] = []

    def _create_engine(self) -> MatchEngine:
        return MatchEngine(
            payoff_matrix=self.config.payoff_matrix,
            rng=self.rng,
            num_rounds=self.config.num_rounds if self.config.continuation_prob is None else None,
            continuation_prob=self.config.continuation_prob,
            max_rounds=self.config.max_rounds,
        )

    def _run_match(self, engine: MatchEngine, code1: str, code2: str) -> MatchResult:
        """Run a match between fresh instances of two strategies."""
        strategy1 = create_strategy(code1, self.config.strategy_params, self.rng)
        strategy2 = create_strategy(code2, self.config.strategy_params, self.rng)
        return engine.play(strategy1, strategy2)

    def run_pairwise(self, code1: str, code2: str) -> MatchResult:
        """Play a single match between two strategies.

        Raises:
            KeyError: If either code is not a known strategy.
        """
        self.rng.reset(self.config.seed)
        logger.debug("Pairwise %s vs %s with seed %d", code1, code2, self.config.seed)

        result = self._run_match(self._create_engine(), code1, code2)
        self.match_results = [result]
        return result

    def _generate_round_robin_matchups(self, codes: List[str]) -> List[Tuple[str, str]]:
        """Distinct pairs in code order, followed by self-play for each code."""
        matchups = list(combinations(codes, 2))
        matchups.extend((code, code) for code in codes)
        return matchups

    def run_round_robin(self) -> RoundRobinResult:
        """Execute the round-robin tournament over all strategies.

        Returns:
            RoundRobinResult with match results, aggregates and score mapping
        """
        codes = list(STRATEGY_CODES)
        strategy_names = [get_strategy_name(code) for code in codes]
        self.rng.reset(self.config.seed)
        logger.debug("Round-robin over %d strategies with seed %d", len(codes), self.config.seed)

        score_mapping: Dict[str, Dict[str, Optional[float]]] = {
            name1: {name2: None for name2 in strategy_names}
            for name1 in strategy_names
        }
        aggregated = {name: AggregatedStrategyStats(name=name) for name in strategy_names}

        engine = self._create_engine()
        matchups = self._generate_round_robin_matchups(codes)
        total_matchups = len(matchups)
        self.match_results = []

        for completed, (code1, code2) in enumerate(matchups):
            if self.progress_callback:
                self.progress_callback(completed, total_matchups, f"{code1} vs {code2}")

            result = self._run_match(engine, code1, code2)
            self.match_results.append(result)

            name1, name2 = result.strategy1_name, result.strategy2_name
            aggregated[name1].add_match(result.final_score1, result.cooperation_rate1)
            if code1 == code2:
                # Self-play fills the diagonal and counts once
                score_mapping[name1][name1] = result.final_score1
            else:
                score_mapping[name1][name2] = result.final_score1
                score_mapping[name2][name1] = result.final_score2
                aggregated[name2].add_match(result.final_score2, result.cooperation_rate2)

        if self.progress_callback:
            self.progress_callback(total_matchups, total_matchups, "Tournament complete")

        score_matrix, strategy_indices = _build_score_matrix(score_mapping, strategy_names)

        return RoundRobinResult(
            match_results=self.match_results,
            aggregated=aggregated,
            score_mapping=score_mapping,
            strategy_names=strategy_names,
            score_matrix=score_matrix,
            strategy_indices=strategy_indices,
        )


def _build_score_matrix(
    score_mapping: Dict[str, Dict[str, Optional[float]]],
    strategy_names: List[str],
) -> Tuple[np.ndarray, Dict[str, int]]:
    """Build the head-to-head score matrix.

    Returns:
        Tuple of (NxN matrix with NaN for unplayed cells, name -> index dict)
    """
    n = len(strategy_names)
    strategy_indices = {name: i for i, name in enumerate(strategy_names)}
    matrix = np.full((n, n), np.nan)

    for name1, row in score_mapping.items():
        for name2, score in row.items():
            if score is not None:
                matrix[strategy_indices[name1], strategy_indices[name2]] = score

    return matrix, strategy_indices


def _match_to_dict(match: MatchResult) -> Dict[str, Any]:
    return {
        "strategy1": match.strategy1_name,
        "strategy2": match.strategy2_name,
        "final_score1": match.final_score1,
        "final_score2": match.final_score2,
        "cooperation_rate1": match.cooperation_rate1,
        "cooperation_rate2": match.cooperation_rate2,
        "rounds_played": match.rounds_played,
        "hit_round_limit": match.hit_round_limit,
        "rounds": [
            {
                "round": r.round_number,
                "move1": r.action1.value,
                "move2": r.action2.value,
                "payoff1": r.payoff1,
                "payoff2": r.payoff2,
                "cum_score1": r.cumulative1,
                "cum_score2": r.cumulative2,
            }
            for r in match.rounds
        ],
    }


def results_to_dict(result: Union[MatchResult, RoundRobinResult]) -> Dict[str, Any]:
    """Convert a pairwise or round-robin result to a serializable dict.

    Args:
        result: MatchResult or RoundRobinResult to convert

    Returns:
        Dict suitable for JSON serialization
    """
    if isinstance(result, MatchResult):
        return _match_to_dict(result)

    return {
        "strategy_names": list(result.strategy_names),
        "match_results": [_match_to_dict(m) for m in result.match_results],
        "aggregated": {
            name: {
                "total_score": stats.total_score,
                "games_played": stats.games_played,
                "average_score": stats.average_score,
                "cooperation_rate": stats.average_cooperation_rate,
            }
            for name, stats in result.aggregated.items()
        },
        "score_mapping": {
            name: dict(row) for name, row in result.score_mapping.items()
        },
    }


def standings_to_dataframe(result: RoundRobinResult) -> pl.DataFrame:
    """One row per strategy, in tournament order."""
    return pl.DataFrame({
        "strategy": result.strategy_names,
        "total_score": [result.aggregated[n].total_score for n in result.strategy_names],
        "games_played": [result.aggregated[n].games_played for n in result.strategy_names],
        "average_score": [result.aggregated[n].average_score for n in result.strategy_names],
        "cooperation_rate": [
            result.aggregated[n].average_cooperation_rate for n in result.strategy_names
        ],
    })


def rounds_to_dataframe(match: MatchResult) -> pl.DataFrame:
    """Round log as a DataFrame with running cooperation rates.

    Columns: round, move1, move2, payoff1, payoff2, cum_score1, cum_score2,
    coop_rate1, coop_rate2.
    """
    df = pl.DataFrame(
        {
            "round": [r.round_number for r in match.rounds],
            "move1": [r.action1.value for r in match.rounds],
            "move2": [r.action2.value for r in match.rounds],
            "payoff1": [float(r.payoff1) for r in match.rounds],
            "payoff2": [float(r.payoff2) for r in match.rounds],
            "cum_score1": [float(r.cumulative1) for r in match.rounds],
            "cum_score2": [float(r.cumulative2) for r in match.rounds],
        },
        schema={
            "round": pl.Int64,
            "move1": pl.Utf8,
            "move2": pl.Utf8,
            "payoff1": pl.Float64,
            "payoff2": pl.Float64,
            "cum_score1": pl.Float64,
            "cum_score2": pl.Float64,
        },
    )
    return df.with_columns(
        ((pl.col("move1") == "C").cast(pl.Int64).cum_sum() / pl.col("round")).alias("coop_rate1"),
        ((pl.col("move2") == "C").cast(pl.Int64).cum_sum() / pl.col("round")).alias("coop_rate2"),
    )


def create_tournament(config: SimulationConfig) -> TournamentRunner:
    """Create a runner from a SimulationConfig.

    Args:
        config: Run configuration (payoffs, seed, duration, forgiveness)

    Returns:
        TournamentRunner ready for run_pairwise or run_round_robin
    """
    return TournamentRunner(TournamentConfig.from_simulation_config(config))
