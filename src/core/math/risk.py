"""
Risk Model — дисперсия портфеля и Value-at-Risk

ФОРМУЛЫ:
    variance = wᵀΣw                  (квадратичная форма)
    VaR      = z × sqrt(variance)    (параметрический VaR)

z — квантиль стандартного нормального распределения (например 1.65 для ~95%
одностороннего доверия).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для симметричной PSD матрицы Σ: wᵀΣw ≥ 0
2. variance < 0 (не-PSD вход) → ArithmeticDomainViolation, а не NaN
3. Несовпадение размерностей → DimensionMismatch из linear_algebra
"""

import math

from src.core.math.linear_algebra import Matrix, Vector, dot, mat_vec_mul


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticDomainViolation(ArithmeticError):
    """
    Нарушение domain для sqrt: дисперсия портфеля отрицательна.

    Возникает только при некорректной (не-PSD) ковариационной матрице.
    Ответственность за вход лежит на вызывающем коде; результат VaR в этом
    случае не определён и не подменяется нулём.
    """
    pass


# =============================================================================
# VARIANCE
# =============================================================================


def quadratic_form(weights: Vector, cov: Matrix) -> float:
    """
    Квадратичная форма wᵀΣw.

    Вычисляется как dot(w, Σw).

    Args:
        weights: Веса активов (длина N)
        cov: Ковариационная матрица N×N (порядок строк/столбцов как у weights)

    Returns:
        Дисперсия портфеля (≥ 0 для PSD Σ)

    Raises:
        DimensionMismatch: если Σ не N×N
    """
    sigma_w = mat_vec_mul(cov, weights)
    return dot(weights, sigma_w)


portfolio_variance = quadratic_form


# =============================================================================
# VALUE-AT-RISK
# =============================================================================


def value_at_risk(weights: Vector, cov: Matrix, z: float) -> float:
    """
    Параметрический Value-at-Risk: z × sqrt(wᵀΣw).

    Args:
        weights: Веса активов
        cov: Ковариационная матрица
        z: Множитель доверия (квантиль)

    Returns:
        VaR (в единицах доходности портфеля)

    Raises:
        ArithmeticDomainViolation: если дисперсия отрицательна
        DimensionMismatch: если размерности не совпадают

    Examples:
        >>> value_at_risk([1.0], [[0.04]], 2.0)
        0.4
    """
    variance = portfolio_variance(weights, cov)

    if variance < 0:
        raise ArithmeticDomainViolation(
            f"Portfolio variance is negative ({variance:.12e}): "
            f"covariance matrix is not positive semi-definite, sqrt undefined"
        )

    return z * math.sqrt(variance)
