"""
Linear Algebra Kernel — умножение матрицы на вектор и скалярное произведение

Чистые функции над векторами фиксированной длины (list/tuple float).
Используются RiskModel для квадратичной формы wᵀΣw.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несовпадение размерностей → DimensionMismatch (никакого broadcasting,
   усечения или дополнения нулями)
2. Суммирование простое, слева направо, без компенсации (Kahan и т.п.).
   Для портфелей доменного размера (десятки активов) погрешность пренебрежима
3. Входы не модифицируются, результат — новый list
"""

from typing import Sequence

Vector = Sequence[float]
Matrix = Sequence[Sequence[float]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionMismatch(Exception):
    """
    Несовпадение размерностей векторов/матриц.

    Наследуется от Exception, а не от ValueError: pydantic-валидаторы
    перехватывают только ValueError/AssertionError, поэтому DimensionMismatch
    из model_validator доходит до вызывающего кода без обёртки.
    """
    pass


# =============================================================================
# ПРОВЕРКИ РАЗМЕРНОСТЕЙ
# =============================================================================


def check_same_length(name_a: str, a: Vector, name_b: str, b: Vector) -> int:
    """
    Проверка совпадения длин двух векторов.

    Returns:
        Общая длина N

    Raises:
        DimensionMismatch: если len(a) != len(b)
    """
    if len(a) != len(b):
        raise DimensionMismatch(
            f"Length mismatch: len({name_a})={len(a)} != len({name_b})={len(b)}"
        )
    return len(a)


def check_square(name: str, matrix: Matrix, size: int) -> None:
    """
    Проверка, что матрица квадратная size×size.

    Raises:
        DimensionMismatch: если число строк или длина любой строки != size
    """
    if len(matrix) != size:
        raise DimensionMismatch(
            f"{name} must have {size} rows, got {len(matrix)}"
        )
    for i, row in enumerate(matrix):
        if len(row) != size:
            raise DimensionMismatch(
                f"{name} row {i} must have {size} columns, got {len(row)}"
            )


# =============================================================================
# KERNEL
# =============================================================================


def dot(a: Vector, b: Vector) -> float:
    """
    Скалярное произведение Σ a[i]·b[i].

    Raises:
        DimensionMismatch: если длины векторов различаются

    Examples:
        >>> dot([1.0, 2.0], [3.0, 4.0])
        11.0
    """
    check_same_length("a", a, "b", b)

    total = 0.0
    for x, y in zip(a, b):
        total += x * y
    return total


def mat_vec_mul(matrix: Matrix, vector: Vector) -> list[float]:
    """
    Умножение матрицы N×N на вектор длины N: (Mv)[i] = Σ_j M[i][j]·v[j].

    Args:
        matrix: Квадратная матрица (последовательность строк)
        vector: Вектор длины N

    Returns:
        Новый вектор длины N

    Raises:
        DimensionMismatch: если матрица не квадратная или не совпадает с вектором

    Examples:
        >>> mat_vec_mul([[1.0, 0.0], [0.0, 2.0]], [3.0, 4.0])
        [3.0, 8.0]
    """
    check_square("matrix", matrix, len(vector))

    return [dot(row, vector) for row in matrix]
