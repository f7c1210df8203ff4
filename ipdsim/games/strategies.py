"""Strategy definitions and registry.

The strategy set is closed: round-robin tournaments iterate over
``STRATEGY_CODES`` in its fixed order.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..core.config import DEFAULT_FORGIVENESS
from ..core.random_source import RandomSource
from ..core.types import Action


class Strategy:
    """Base class for a strategy playing one match at a time.

    Holds the strategy's own history, the observed opponent history and the
    running score. Subclasses implement ``decide``.
    """

    code: str = ""
    name: str = ""

    def __init__(self):
        self.history: List[Action] = []
        self.opponent_history: List[Action] = []
        self.score: float = 0.0

    def decide(
        self,
        own_history: Sequence[Action],
        opponent_history: Sequence[Action],
    ) -> Action:
        """Choose the action for the next round."""
        raise NotImplementedError

    def next_action(self) -> Action:
        """Decide using the histories recorded so far in this match."""
        return self.decide(self.history, self.opponent_history)

    def observe(self, own_action: Action, opponent_action: Action, payoff: float) -> None:
        """Record this round's moves and add the payoff to the score."""
        self.history.append(own_action)
        self.opponent_history.append(opponent_action)
        self.score += payoff

    def reset(self) -> None:
        """Clear all per-match state."""
        self.history = []
        self.opponent_history = []
        self.score = 0.0

    def cooperation_rate(self) -> float:
        """Fraction of own actions that were COOPERATE (0 with no actions)."""
        if not self.history:
            return 0.0
        cooperations = sum(1 for a in self.history if a == Action.COOPERATE)
        return cooperations / len(self.history)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rounds={len(self.history)}, score={self.score})"


class AlwaysCooperate(Strategy):
    code = "ALLC"
    name = "Always Cooperate (ALL-C)"

    def decide(self, own_history, opponent_history):
        return Action.COOPERATE


class AlwaysDefect(Strategy):
    code = "ALLD"
    name = "Always Defect (ALL-D)"

    def decide(self, own_history, opponent_history):
        return Action.DEFECT


class TitForTat(Strategy):
    """Cooperate first, then copy the opponent's previous move."""

    code = "TFT"
    name = "Tit-for-Tat (TFT)"

    def decide(self, own_history, opponent_history):
        if not opponent_history:
            return Action.COOPERATE
        return opponent_history[-1]


class GrimTrigger(Strategy):
    """Cooperate until the opponent defects once, then defect forever.

    The trigger stays latched for the rest of the match.
    """

    code = "GRIM"
    name = "Grim Trigger"

    def __init__(self):
        super().__init__()
        self.triggered = False

    def decide(self, own_history, opponent_history):
        if self.triggered:
            return Action.DEFECT

        if opponent_history and opponent_history[-1] == Action.DEFECT:
            self.triggered = True
            return Action.DEFECT

        return Action.COOPERATE

    def reset(self) -> None:
        super().reset()
        self.triggered = False


class GenerousTitForTat(Strategy):
    """Tit-for-Tat that forgives a defection with probability ``forgiveness``.

    Exactly one value is drawn from the random source for every decision that
    follows an opponent defection, and none otherwise. The draw happens even
    when ``forgiveness`` is 0.
    """

    code = "GTFT"
    name = "Generous TFT"

    def __init__(self, rng: RandomSource, forgiveness: float = DEFAULT_FORGIVENESS):
        super().__init__()
        self.rng = rng
        self.forgiveness = forgiveness

    def decide(self, own_history, opponent_history):
        if not opponent_history or opponent_history[-1] == Action.COOPERATE:
            return Action.COOPERATE

        if self.rng.draw() < self.forgiveness:
            return Action.COOPERATE

        return Action.DEFECT


STRATEGY_REGISTRY: Dict[str, type] = {
    "ALLC": AlwaysCooperate,
    "ALLD": AlwaysDefect,
    "TFT": TitForTat,
    "GRIM": GrimTrigger,
    "GTFT": GenerousTitForTat,
}

# Fixed enumeration order used by round-robin tournaments
STRATEGY_CODES = tuple(STRATEGY_REGISTRY.keys())

STRATEGY_PARAM_KEYS = frozenset({"forgiveness"})


def _lookup(code: str) -> type:
    if code in STRATEGY_REGISTRY:
        return STRATEGY_REGISTRY[code]
    available = ", ".join(STRATEGY_CODES)
    raise KeyError(f"Unknown strategy '{code}'. Available strategies: {available}")


def get_strategy_name(code: str) -> str:
    """Get the display name for a strategy code.

    Raises:
        KeyError: If the code is not a known strategy.
    """
    return _lookup(code).name


def get_strategy_names() -> Dict[str, str]:
    """Get a mapping of strategy code to display name."""
    return {code: cls.name for code, cls in STRATEGY_REGISTRY.items()}


def list_strategy_codes() -> List[str]:
    """List all strategy codes in tournament order."""
    return list(STRATEGY_CODES)


def create_strategy(
    code: str,
    params: Optional[Dict[str, Any]] = None,
    rng: Optional[RandomSource] = None,
) -> Strategy:
    """Create a fresh strategy instance.

    Args:
        code: Strategy code (ALLC, ALLD, TFT, GRIM, GTFT).
        params: Strategy parameters. Only ``forgiveness`` is recognized and
            only GTFT uses it.
        rng: Shared random source, required for GTFT.

    Returns:
        A new Strategy with empty history.

    Raises:
        KeyError: If the code is not a known strategy.
        ValueError: If params contain an unrecognized key, or GTFT is
            requested without a random source.
    """
    params = params or {}
    unknown = sorted(set(params) - STRATEGY_PARAM_KEYS)
    if unknown:
        raise ValueError(
            f"Unrecognized strategy parameter(s): {', '.join(unknown)}. "
            f"Valid parameters: {', '.join(sorted(STRATEGY_PARAM_KEYS))}"
        )

    strategy_cls = _lookup(code)

    if strategy_cls is GenerousTitForTat:
        if rng is None:
            raise ValueError("Strategy 'GTFT' requires a RandomSource")
        forgiveness = params.get("forgiveness")
        if forgiveness is None:
            forgiveness = DEFAULT_FORGIVENESS
        return GenerousTitForTat(rng, forgiveness=forgiveness)

    return strategy_cls()
