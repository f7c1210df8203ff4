"""Match engine: plays one pairing of two strategies.

Supports fixed-length matches and indefinite-horizon matches where each
additional round is played with a fixed continuation probability.
"""

import logging
import numbers
from typing import List, Optional

from ..core.config import MAX_INDEFINITE_ROUNDS
from ..core.random_source import RandomSource
from ..core.types import MatchResult, RoundRecord
from ..games.payoff import PayoffMatrix
from ..games.strategies import Strategy

logger = logging.getLogger(__name__)


class MatchEngine:
    """Runs matches between two strategy instances."""

    def __init__(
        self,
        payoff_matrix: PayoffMatrix,
        rng: RandomSource,
        num_rounds: Optional[int] = None,
        continuation_prob: Optional[float] = None,
        max_rounds: int = MAX_INDEFINITE_ROUNDS,
    ):
        """Initialize the match engine.

        Args:
            payoff_matrix: Payoffs for each action pair
            rng: Shared random source, drawn once after every round in
                indefinite-horizon mode
            num_rounds: Exact number of rounds for fixed-length matches
            continuation_prob: Probability of playing another round
                (indefinite horizon). Mutually exclusive with num_rounds.
            max_rounds: Safety ceiling for indefinite-horizon matches

        Raises:
            ValueError: If neither or both of num_rounds and continuation_prob
                are given, or num_rounds is not a non-negative integer.
        """
        if (num_rounds is None) == (continuation_prob is None):
            raise ValueError("Specify exactly one of num_rounds or continuation_prob")
        if num_rounds is not None:
            if (
                isinstance(num_rounds, bool)
                or not isinstance(num_rounds, numbers.Integral)
                or num_rounds < 0
            ):
                raise ValueError(f"num_rounds must be a non-negative integer, got {num_rounds!r}")

        self.payoff_matrix = payoff_matrix
        self.rng = rng
        self.num_rounds = num_rounds
        self.continuation_prob = continuation_prob
        self.max_rounds = max_rounds
        self.round_history: List[RoundRecord] = []

    @property
    def is_indefinite(self) -> bool:
        return self.continuation_prob is not None

    def _play_round(self, strategy1: Strategy, strategy2: Strategy) -> RoundRecord:
        # Both decide before either observes this round
        action1 = strategy1.next_action()
        action2 = strategy2.next_action()

        payoff1, payoff2 = self.payoff_matrix.payoff(action1, action2)

        strategy1.observe(action1, action2, payoff1)
        strategy2.observe(action2, action1, payoff2)

        record = RoundRecord(
            round_number=len(self.round_history) + 1,
            action1=action1,
            action2=action2,
            payoff1=payoff1,
            payoff2=payoff2,
            cumulative1=strategy1.score,
            cumulative2=strategy2.score,
        )
        self.round_history.append(record)
        return record

    def play(self, strategy1: Strategy, strategy2: Strategy) -> MatchResult:
        """Play a full match.

        Both strategies are reset first, so instances may be reused across
        matches.

        Returns:
            MatchResult with final scores, cooperation rates and round log.
        """
        strategy1.reset()
        strategy2.reset()
        self.round_history = []
        hit_round_limit = False

        if self.is_indefinite:
            # Always play at least one round
            self._play_round(strategy1, strategy2)
            rounds_played = 1

            while self.rng.draw() < self.continuation_prob and rounds_played < self.max_rounds:
                self._play_round(strategy1, strategy2)
                rounds_played += 1

            if rounds_played >= self.max_rounds:
                hit_round_limit = True
                logger.warning(
                    "Match %s vs %s reached maximum round limit of %d rounds",
                    strategy1.name, strategy2.name, self.max_rounds,
                )
        else:
            for _ in range(self.num_rounds):
                self._play_round(strategy1, strategy2)

        logger.debug(
            "Match %s vs %s finished after %d rounds: %s-%s",
            strategy1.name, strategy2.name, len(self.round_history),
            strategy1.score, strategy2.score,
        )

        return MatchResult(
            strategy1_name=strategy1.name,
            strategy2_name=strategy2.name,
            final_score1=strategy1.score,
            final_score2=strategy2.score,
            cooperation_rate1=strategy1.cooperation_rate(),
            cooperation_rate2=strategy2.cooperation_rate(),
            rounds=self.round_history,
            hit_round_limit=hit_round_limit,
        )
