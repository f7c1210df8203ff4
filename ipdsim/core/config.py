"""Configuration constants and run configuration for the simulation engine."""

import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# Classic payoff values (Temptation, Reward, Punishment, Sucker)
DEFAULT_TEMPTATION = 5.0
DEFAULT_REWARD = 3.0
DEFAULT_PUNISHMENT = 1.0
DEFAULT_SUCKER = 0.0

# Run defaults - configurable via environment variables
DEFAULT_SEED = int(os.environ.get("IPDSIM_SEED", "42"))
DEFAULT_NUM_ROUNDS = int(os.environ.get("IPDSIM_NUM_ROUNDS", "100"))
DEFAULT_FORGIVENESS = float(os.environ.get("IPDSIM_FORGIVENESS", "0.1"))

# Input limits for fixed-length matches
MIN_NUM_ROUNDS = 1
MAX_NUM_ROUNDS = int(os.environ.get("IPDSIM_MAX_ROUNDS", "1000"))

# Hard ceiling for indefinite-horizon matches
MAX_INDEFINITE_ROUNDS = 10000


@dataclass
class SimulationConfig:
    """Everything a run needs: payoffs, seed, duration and GTFT forgiveness.

    Set ``continuation_prob`` to play indefinite-horizon matches; otherwise
    every match lasts ``num_rounds`` rounds.
    """
    temptation: float = DEFAULT_TEMPTATION
    reward: float = DEFAULT_REWARD
    punishment: float = DEFAULT_PUNISHMENT
    sucker: float = DEFAULT_SUCKER
    seed: int = DEFAULT_SEED
    num_rounds: Optional[int] = DEFAULT_NUM_ROUNDS
    continuation_prob: Optional[float] = None
    forgiveness: float = DEFAULT_FORGIVENESS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        """Build a config from a plain dict.

        Raises:
            ValueError: If ``data`` contains a key that is not a config field.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unrecognized configuration key(s): {', '.join(unknown)}. "
                f"Valid keys: {', '.join(sorted(known))}"
            )
        config = cls(**data)
        if config.continuation_prob is not None and "num_rounds" not in data:
            config.num_rounds = None
        return config

    @property
    def is_indefinite(self) -> bool:
        return self.continuation_prob is not None

    def payoff_matrix(self) -> "PayoffMatrix":
        """Create the PayoffMatrix for this config."""
        from ..games.payoff import PayoffMatrix

        return PayoffMatrix(
            T=self.temptation,
            R=self.reward,
            P=self.punishment,
            S=self.sucker,
        )

    def strategy_params(self) -> Dict[str, Any]:
        """Parameters applied to every strategy created in a run."""
        return {"forgiveness": self.forgiveness}

    def validate(self) -> Tuple[bool, str]:
        """Check input ranges before a run.

        The engine does not enforce these bounds itself; callers that accept
        user input should reject invalid configs here.

        Returns:
            Tuple of (is_valid, error_message). error_message is empty if valid.
        """
        if self.is_indefinite:
            if self.continuation_prob < 0 or self.continuation_prob > 1:
                return False, "Continuation probability must be between 0.0 and 1.0"
            if self.continuation_prob == 0:
                return False, "Continuation probability cannot be 0 (game would never start)"
        else:
            if self.num_rounds is None:
                return False, "Number of rounds is required for fixed-length matches"
            if self.num_rounds < MIN_NUM_ROUNDS or self.num_rounds > MAX_NUM_ROUNDS:
                return False, (
                    f"Number of rounds must be between {MIN_NUM_ROUNDS} and {MAX_NUM_ROUNDS}"
                )

        if not isinstance(self.seed, int) or self.seed < 1:
            return False, "Random seed must be a positive integer"

        if self.forgiveness < 0 or self.forgiveness > 1:
            return False, "Forgiveness rate must be between 0.0 and 1.0"

        return True, ""

    def payoff_warning(self) -> Optional[str]:
        """Advisory message when payoffs are not a classical Prisoner's Dilemma."""
        if self.payoff_matrix().is_standard_dilemma():
            return None
        logger.debug(
            "Non-standard payoffs T=%s R=%s P=%s S=%s",
            self.temptation, self.reward, self.punishment, self.sucker,
        )
        return (
            "Payoff matrix does not satisfy standard Prisoner's Dilemma "
            "conditions (T > R > P > S and 2R > T + S). Continuing anyway."
        )
