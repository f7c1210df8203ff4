"""Payoff model for the two-player Prisoner's Dilemma."""

from dataclasses import dataclass
from typing import Tuple, Union

from ..core.types import Action

PayoffValue = Union[int, float]


@dataclass(frozen=True)
class PayoffMatrix:
    """(T, R, P, S) payoff matrix.

    No ordering is enforced: non-standard or negative values are computed
    exactly like the classical ones.
    """
    T: PayoffValue = 5  # Temptation (defect while opponent cooperates)
    R: PayoffValue = 3  # Reward (both cooperate)
    P: PayoffValue = 1  # Punishment (both defect)
    S: PayoffValue = 0  # Sucker (cooperate while opponent defects)

    def payoff(self, action1: Action, action2: Action) -> Tuple[PayoffValue, PayoffValue]:
        """Return (payoff1, payoff2) for the given action pair."""
        if action1 == Action.COOPERATE and action2 == Action.COOPERATE:
            return self.R, self.R
        if action1 == Action.COOPERATE:
            return self.S, self.T
        if action2 == Action.COOPERATE:
            return self.T, self.S
        return self.P, self.P

    def is_standard_dilemma(self) -> bool:
        """Check T > R > P > S and 2R > T + S."""
        ordered = self.T > self.R > self.P > self.S
        return ordered and 2 * self.R > self.T + self.S
