"""Behavioral tests for the strategy set and registry."""

import pytest

from ..core.config import DEFAULT_FORGIVENESS
from ..core.random_source import RandomSource
from ..core.types import Action
from .strategies import (
    STRATEGY_CODES,
    AlwaysCooperate,
    AlwaysDefect,
    GenerousTitForTat,
    GrimTrigger,
    TitForTat,
    create_strategy,
    get_strategy_name,
    get_strategy_names,
    list_strategy_codes,
)

C = Action.COOPERATE
D = Action.DEFECT


def play_against(strategy, opponent_moves):
    """Feed a fixed opponent sequence to a strategy, returning its moves."""
    moves = []
    for opp in opponent_moves:
        own = strategy.next_action()
        strategy.observe(own, opp, 0)
        moves.append(own)
    return moves


class TestFixedStrategies:
    """Tests for ALL-C, ALL-D and TFT."""

    def test_all_c(self):
        assert play_against(AlwaysCooperate(), [D, D, C, D]) == [C, C, C, C]

    def test_all_d(self):
        assert play_against(AlwaysDefect(), [C, C, C]) == [D, D, D]

    def test_tft_opens_with_cooperation(self):
        assert TitForTat().decide([], []) == C

    def test_tft_mirrors_last_move(self):
        moves = play_against(TitForTat(), [D, C, D, D, C])
        assert moves == [C, D, C, D, D]


class TestGrimTrigger:
    """Tests for the GRIM latch."""

    def test_cooperates_until_defection(self):
        moves = play_against(GrimTrigger(), [C, C, C])
        assert moves == [C, C, C]

    def test_latches_after_single_defection(self):
        """One defection triggers permanent defection despite later cooperation."""
        grim = GrimTrigger()
        moves = play_against(grim, [C, D, C, C, C, C])
        assert moves == [C, C, D, D, D, D]
        assert grim.triggered is True

    def test_reset_clears_latch(self):
        grim = GrimTrigger()
        play_against(grim, [D, C])
        grim.reset()
        assert grim.triggered is False
        assert grim.history == []
        assert grim.next_action() == C


class TestGenerousTitForTat:
    """Tests for GTFT forgiveness and random draw consumption."""

    def test_no_draw_without_defection(self):
        rng = RandomSource(42)
        gtft = GenerousTitForTat(rng, forgiveness=0.5)
        assert play_against(gtft, [C, C, C]) == [C, C, C]
        assert rng.seed == 42

    def test_one_draw_per_defection_decision(self):
        rng = RandomSource(42)
        gtft = GenerousTitForTat(rng, forgiveness=0.5)
        # Decisions after D: rounds 2, 3 and 5
        play_against(gtft, [D, D, C, D, C])

        expected = RandomSource(42)
        for _ in range(3):
            expected.draw()
        assert rng.seed == expected.seed

    def test_zero_forgiveness_matches_tft_but_still_draws(self):
        opponent = [D, C, D, D, C, D, D, D]
        rng = RandomSource(9)
        gtft_moves = play_against(GenerousTitForTat(rng, forgiveness=0.0), opponent)
        tft_moves = play_against(TitForTat(), opponent)

        assert gtft_moves == tft_moves

        defection_decisions = sum(1 for m in opponent[:-1] if m == D)
        expected = RandomSource(9)
        for _ in range(defection_decisions):
            expected.draw()
        assert rng.seed == expected.seed

    def test_full_forgiveness_always_cooperates(self):
        gtft = GenerousTitForTat(RandomSource(3), forgiveness=1.0)
        assert play_against(gtft, [D] * 20) == [C] * 20

    def test_forgiveness_follows_draw(self):
        """Forgive exactly when the draw is below the forgiveness rate."""
        rng = RandomSource(77)
        probe = RandomSource(77)
        gtft = GenerousTitForTat(rng, forgiveness=0.4)

        moves = play_against(gtft, [D] * 50)
        expected = [C] + [C if probe.draw() < 0.4 else D for _ in range(49)]
        assert moves == expected


class TestStrategyState:
    """Tests for history, score and cooperation rate bookkeeping."""

    def test_observe_updates_histories_and_score(self):
        tft = TitForTat()
        tft.observe(C, D, 0)
        tft.observe(D, D, 1.5)
        assert tft.history == [C, D]
        assert tft.opponent_history == [D, D]
        assert tft.score == 1.5

    def test_cooperation_rate(self):
        tft = TitForTat()
        assert tft.cooperation_rate() == 0.0
        play_against(tft, [D, C, C, C])  # moves C, D, C, C
        assert tft.cooperation_rate() == pytest.approx(0.75)

    def test_reset(self):
        strategy = AlwaysDefect()
        strategy.observe(D, C, 5)
        strategy.reset()
        assert strategy.history == []
        assert strategy.opponent_history == []
        assert strategy.score == 0.0


class TestRegistry:
    """Tests for strategy lookup and construction."""

    def test_codes_in_fixed_order(self):
        assert STRATEGY_CODES == ("ALLC", "ALLD", "TFT", "GRIM", "GTFT")
        assert list_strategy_codes() == list(STRATEGY_CODES)

    def test_display_names(self):
        assert get_strategy_names() == {
            "ALLC": "Always Cooperate (ALL-C)",
            "ALLD": "Always Defect (ALL-D)",
            "TFT": "Tit-for-Tat (TFT)",
            "GRIM": "Grim Trigger",
            "GTFT": "Generous TFT",
        }

    def test_unknown_code_raises(self):
        with pytest.raises(KeyError, match="Unknown strategy"):
            get_strategy_name("PAVLOV")
        with pytest.raises(KeyError, match="Unknown strategy"):
            create_strategy("allc")

    def test_unknown_param_raises(self):
        with pytest.raises(ValueError, match="Unrecognized strategy parameter"):
            create_strategy("TFT", {"noise": 0.1})

    def test_gtft_requires_rng(self):
        with pytest.raises(ValueError, match="RandomSource"):
            create_strategy("GTFT", {"forgiveness": 0.2})

    def test_gtft_forgiveness_param(self):
        rng = RandomSource(1)
        gtft = create_strategy("GTFT", {"forgiveness": 0.25}, rng)
        assert isinstance(gtft, GenerousTitForTat)
        assert gtft.forgiveness == 0.25
        assert gtft.rng is rng

    def test_gtft_default_forgiveness(self):
        gtft = create_strategy("GTFT", rng=RandomSource(1))
        assert gtft.forgiveness == DEFAULT_FORGIVENESS

    def test_fresh_instances(self):
        a = create_strategy("GRIM")
        b = create_strategy("GRIM")
        assert a is not b
        a.observe(C, D, 0)
        assert b.history == []
