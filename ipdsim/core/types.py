"""Type definitions for the simulation engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import numpy as np


class Action(str, Enum):
    """A single strategy's choice in one round."""
    COOPERATE = "C"
    DEFECT = "D"


@dataclass(frozen=True)
class RoundRecord:
    """Result of a single round. Immutable once appended."""
    round_number: int
    action1: Action
    action2: Action
    payoff1: float
    payoff2: float
    cumulative1: float
    cumulative2: float


@dataclass
class MatchResult:
    """Result of one match between two strategy instances."""
    strategy1_name: str
    strategy2_name: str
    final_score1: float
    final_score2: float
    cooperation_rate1: float
    cooperation_rate2: float
    rounds: List[RoundRecord] = field(default_factory=list)
    # True whenever an indefinite-horizon match reached max_rounds, including
    # when the final continuation draw failed on that same round
    hit_round_limit: bool = False

    @property
    def rounds_played(self) -> int:
        return len(self.rounds)


@dataclass
class AggregatedStrategyStats:
    """Per-strategy totals across a round-robin run."""
    name: str
    total_score: float = 0.0
    games_played: int = 0
    cooperation_rate_sum: float = 0.0

    def add_match(self, score: float, cooperation_rate: float) -> None:
        self.total_score += score
        self.games_played += 1
        self.cooperation_rate_sum += cooperation_rate

    @property
    def average_score(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.total_score / self.games_played

    @property
    def average_cooperation_rate(self) -> float:
        """Mean of per-match cooperation rates (not pooled over actions)."""
        if self.games_played == 0:
            return 0.0
        return self.cooperation_rate_sum / self.games_played


@dataclass
class RoundRobinResult:
    """Complete round-robin results."""
    match_results: List[MatchResult]
    aggregated: Dict[str, AggregatedStrategyStats]
    score_mapping: Dict[str, Dict[str, Optional[float]]]  # name -> opponent -> score
    strategy_names: List[str]
    score_matrix: np.ndarray           # NxN scores, NaN where unplayed
    strategy_indices: Dict[str, int]   # name -> index in matrix
