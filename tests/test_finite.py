"""Exact behaviour of the finite-support generators on scripted draws."""

import math

import pytest

from crandom import (
    ScriptedSource,
    bernoulli,
    binomial,
    equilikely,
    geometric,
    new_from_seed,
    pascal,
    poisson,
)


class TestBernoulli:
    def test_one_when_draw_exceeds_p(self):
        # The comparison is u > p: the draw must be above p to give 1.
        assert bernoulli(ScriptedSource([0.5]), 0.3) == 1
        assert bernoulli(ScriptedSource([0.2]), 0.3) == 0

    def test_draw_equal_to_p_gives_zero(self):
        assert bernoulli(ScriptedSource([0.25]), 0.25) == 0

    def test_one_has_probability_one_minus_p(self):
        with new_from_seed(8) as src:
            ones = sum(bernoulli(src, 0.2) for _ in range(50_000))
        assert ones / 50_000 == pytest.approx(0.8, abs=0.01)

    @pytest.mark.parametrize("p", [1e-12, 0.5, 1.0 - 1e-12])
    def test_extreme_p_only_returns_zero_or_one(self, p):
        with new_from_seed(5) as src:
            values = {bernoulli(src, p) for _ in range(20_000)}
        assert values <= {0, 1}

    def test_returns_int(self):
        assert type(bernoulli(ScriptedSource([0.9]), 0.5)) is int


class TestBinomial:
    def test_counts_draws_above_p(self):
        src = ScriptedSource([0.9, 0.1, 0.6, 0.5])
        assert binomial(src, 4, 0.5) == 2
        assert src.consumed == 4

    def test_matches_repeated_bernoulli(self):
        with new_from_seed(77) as a, new_from_seed(77) as b:
            for _ in range(200):
                expected = sum(bernoulli(b, 0.35) for _ in range(12))
                assert binomial(a, 12, 0.35) == expected

    def test_stays_within_zero_to_n(self, source):
        assert all(0 <= binomial(source, 5, 0.5) <= 5 for _ in range(5_000))


class TestEquilikely:
    @pytest.mark.parametrize("u, expected", [
        (0.0, 1),
        (0.5, 4),
        (0.999999, 6),
        (1 / 6 - 1e-12, 1),
        (1 / 6 + 1e-12, 2),
    ])
    def test_maps_draw_to_integer(self, u, expected):
        assert equilikely(ScriptedSource([u]), 1, 6) == expected

    def test_negative_range(self):
        assert equilikely(ScriptedSource([0.0]), -3, -1) == -3
        assert equilikely(ScriptedSource([0.99]), -3, -1) == -1

    def test_only_returns_values_in_range(self, source):
        values = [equilikely(source, -2, 7) for _ in range(50_000)]
        assert min(values) == -2
        assert max(values) == 7
        assert all(isinstance(v, int) for v in values)


class TestGeometric:
    def test_inverse_cdf(self):
        u = 0.8
        expected = int(math.log(1.0 - u) / math.log(0.5))
        assert expected == 2
        assert geometric(ScriptedSource([u]), 0.5) == expected

    def test_zero_draw_gives_zero(self):
        assert geometric(ScriptedSource([0.0]), 0.7) == 0

    def test_non_negative(self, source):
        assert all(geometric(source, 0.9) >= 0 for _ in range(10_000))


class TestPascal:
    def test_sums_geometric_draws(self):
        draws = [0.8, 0.0, 0.95, 0.3]
        src = ScriptedSource(draws)
        expected = sum(geometric(ScriptedSource([u]), 0.5) for u in draws)
        assert pascal(src, 4, 0.5) == expected
        assert src.consumed == 4

    def test_matches_repeated_geometric_on_a_seeded_stream(self):
        with new_from_seed(123) as a, new_from_seed(123) as b:
            for _ in range(200):
                expected = sum(geometric(b, 0.6) for _ in range(5))
                assert pascal(a, 5, 0.6) == expected


class TestPoisson:
    def test_single_step_crossing_gives_zero(self):
        # -2 * log(0.1) = 4.6 >= 2 on the first step.
        src = ScriptedSource([0.9])
        assert poisson(src, 2.0) == 0
        assert src.consumed == 1

    def test_counts_steps_before_crossing(self):
        # Each u = 0.5 adds 2 * log(2) = 1.386; the second step crosses m = 2.
        src = ScriptedSource([0.5, 0.5])
        assert poisson(src, 2.0) == 1
        assert src.consumed == 2

    def test_small_steps(self):
        # u = 0.1 adds 2 * 0.10536 = 0.2107 per step: 9 steps stay below 2.
        src = ScriptedSource([0.1] * 9 + [0.9])
        assert poisson(src, 2.0) == 9
        assert src.remaining == 0

    @pytest.mark.parametrize("m", [0.5, 5.0, 50.0])
    def test_mean_does_not_depend_on_m(self, m):
        # Inter-arrivals are scaled by m too, so the count is Poisson(1).
        with new_from_seed(31) as src:
            values = [poisson(src, m) for _ in range(40_000)]
        assert sum(values) / len(values) == pytest.approx(1.0, abs=0.03)
        assert min(values) == 0
