"""
Тесты для Risk Model — квадратичная форма и Value-at-Risk

Проверяемые инварианты:
1. wᵀΣw ≥ 0 для Σ = AᵀA (случайные PSD матрицы)
2. VaR не убывает по z
3. Отрицательная дисперсия → ArithmeticDomainViolation (не NaN)
4. portfolio_variance — алиас quadratic_form
"""

import math
import random

import pytest

from src.core.math.linear_algebra import DimensionMismatch
from src.core.math.risk import (
    ArithmeticDomainViolation,
    portfolio_variance,
    quadratic_form,
    value_at_risk,
)

WEIGHTS = [0.4, 0.3, 0.3]
COV = [[0.04, 0.01, 0.02], [0.01, 0.03, 0.015], [0.02, 0.015, 0.05]]


def _random_psd(rng: random.Random, n: int) -> list[list[float]]:
    """Σ = AᵀA для случайной A."""
    a = [[rng.uniform(-1.0, 1.0) for _ in range(n)] for _ in range(n)]
    return [
        [sum(a[k][i] * a[k][j] for k in range(n)) for j in range(n)]
        for i in range(n)
    ]


# =============================================================================
# ТЕСТЫ: Quadratic Form
# =============================================================================


class TestQuadraticForm:
    """Тесты квадратичной формы wᵀΣw."""

    def test_reference_portfolio(self):
        assert quadratic_form(WEIGHTS, COV) == pytest.approx(0.0235)

    def test_single_asset(self):
        assert quadratic_form([2.0], [[0.04]]) == pytest.approx(0.16)

    def test_zero_weights(self):
        assert quadratic_form([0.0, 0.0, 0.0], COV) == 0.0

    def test_alias(self):
        assert portfolio_variance is quadratic_form

    @pytest.mark.parametrize("seed", range(20))
    def test_non_negative_for_psd(self, seed):
        """wᵀ(AᵀA)w = |Aw|² ≥ 0."""
        rng = random.Random(seed)
        n = rng.randint(1, 6)
        cov = _random_psd(rng, n)
        weights = [rng.uniform(-2.0, 2.0) for _ in range(n)]

        assert quadratic_form(weights, cov) >= -1e-12

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            quadratic_form([0.5, 0.5], COV)


# =============================================================================
# ТЕСТЫ: Value-at-Risk
# =============================================================================


class TestValueAtRisk:
    """Тесты параметрического VaR."""

    def test_reference_portfolio(self):
        expected = 1.65 * math.sqrt(0.0235)
        assert value_at_risk(WEIGHTS, COV, 1.65) == pytest.approx(expected)

    def test_zero_variance(self):
        assert value_at_risk([0.0, 0.0, 0.0], COV, 1.65) == 0.0

    def test_z_zero(self):
        assert value_at_risk(WEIGHTS, COV, 0.0) == 0.0

    @pytest.mark.parametrize("seed", range(10))
    def test_monotonic_in_z(self, seed):
        rng = random.Random(seed)
        n = rng.randint(1, 5)
        cov = _random_psd(rng, n)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(n)]
        zs = sorted(rng.uniform(0.0, 4.0) for _ in range(5))

        values = [value_at_risk(weights, cov, z) for z in zs]

        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_negative_variance_raises(self):
        """Не-PSD матрица → ArithmeticDomainViolation, а не NaN."""
        with pytest.raises(ArithmeticDomainViolation):
            value_at_risk([1.0], [[-0.04]], 1.65)

    def test_negative_variance_off_diagonal(self):
        cov = [[0.01, 0.5], [0.5, 0.01]]
        with pytest.raises(ArithmeticDomainViolation):
            value_at_risk([1.0, -1.0], cov, 1.65)

    def test_domain_violation_is_arithmetic_error(self):
        assert issubclass(ArithmeticDomainViolation, ArithmeticError)
