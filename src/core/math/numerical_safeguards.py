"""
Numerical Safeguards — проверки float-входов

Примитивы валидации для всех численных модулей objective:
- NaN/Inf детекция (скаляры и векторы)
- Валидация неотрицательности (tolerance, коэффициенты λ, издержки)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не проходят валидацию молча (ValueError)
2. Валидация не модифицирует входные значения (никаких clamp/fallback)
3. Все операции детерминированы
"""

import math
from typing import Iterable


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение finite.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_finite_vector(values: Iterable[float], name: str) -> None:
    """
    Валидация, что все элементы вектора finite.

    Args:
        values: Вектор значений
        name: Имя вектора (для сообщения об ошибке)

    Raises:
        ValueError: Если хотя бы один элемент NaN/Inf (с указанием индекса)
    """
    for i, v in enumerate(values):
        if not is_valid_float(v):
            raise ValueError(f"{name}[{i}] must be a valid float (not NaN/Inf), got {v}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

