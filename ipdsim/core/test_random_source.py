"""Reproducibility tests for the seeded random source."""

import pytest

from .random_source import RandomSource


class TestRandomSource:
    """Tests for RandomSource determinism and range."""

    @pytest.mark.parametrize("seed", [0, 1, 42, 123, 2**31, 2**32 - 1])
    def test_same_seed_same_sequence(self, seed):
        """Two sources with the same seed produce identical draws."""
        a = RandomSource(seed)
        b = RandomSource(0)
        b.reset(seed)

        assert [a.draw() for _ in range(1000)] == [b.draw() for _ in range(1000)]

    def test_draws_in_unit_interval(self):
        """A million draws all lie in [0, 1)."""
        rng = RandomSource(42)
        low, high = 1.0, 0.0
        for _ in range(10**6):
            x = rng.draw()
            assert 0.0 <= x < 1.0
            low = min(low, x)
            high = max(high, x)
        # Roughly uniform coverage
        assert low < 0.001
        assert high > 0.999

    def test_reset_restarts_sequence(self):
        rng = RandomSource(7)
        first = [rng.draw() for _ in range(10)]
        rng.reset(7)
        assert [rng.draw() for _ in range(10)] == first

    def test_different_seeds_differ(self):
        a = RandomSource(42)
        b = RandomSource(123)
        assert [a.draw() for _ in range(10)] != [b.draw() for _ in range(10)]

    def test_seed_zero_is_not_special(self):
        """Seed 0 produces a normal, non-constant sequence."""
        rng = RandomSource(0)
        values = [rng.draw() for _ in range(100)]
        assert len(set(values)) > 90

    def test_seed_masked_to_32_bits(self):
        a = RandomSource(2**32 + 5)
        b = RandomSource(5)
        assert a.seed == 5
        assert a.draw() == b.draw()

    def test_draw_advances_state(self):
        rng = RandomSource(42)
        before = rng.seed
        rng.draw()
        assert rng.seed == (before + 0x6D2B79F5) & 0xFFFFFFFF

    def test_mean_is_near_half(self):
        rng = RandomSource(2024)
        n = 20000
        mean = sum(rng.draw() for _ in range(n)) / n
        assert mean == pytest.approx(0.5, abs=0.02)


class TestKnownSequence:
    """Mulberry32 known-answer values, so streams match other implementations."""

    def test_seed_42_first_draws(self):
        rng = RandomSource(42)
        assert [rng.draw(), rng.draw()] == [0.6011037519201636, 0.44829055899754167]

    def test_seed_zero_first_draw(self):
        assert RandomSource(0).draw() == 0.26642920868471265

    def test_max_seed_first_draw(self):
        assert RandomSource(2**32 - 1).draw() == 0.8964226141106337

    def test_seed_42_hundred_thousandth_draw(self):
        rng = RandomSource(42)
        for _ in range(99999):
            rng.draw()
        assert rng.draw() == 0.9818388000130653
