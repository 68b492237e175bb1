"""
Latency Instrumentation — измерение времени вычисления и штраф латентности

measure(computation) выполняет переданное вычисление ровно один раз,
синхронно, в вызывающем потоке, и возвращает пару (result, elapsed_seconds).
Глобального таймера нет: каждое измерение — отдельный вызов.

ПОЛИТИКА ШТРАФА (значения по умолчанию):
    elapsed > LATENCY_THRESHOLD_SEC  → elapsed × LATENCY_PENALTY_SCALE
    elapsed ≤ LATENCY_THRESHOLD_SEC  → 0.0

Порог 10 ms и масштаб ×1000 (секунды → миллисекунды) — фиксированные
константы политики; LatencyPolicy позволяет переопределить их через config.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Final, NamedTuple, TypeVar

from src.core.math.numerical_safeguards import validate_non_negative

T = TypeVar("T")

# =============================================================================
# КОНСТАНТЫ ПОЛИТИКИ
# =============================================================================

# Порог латентности (секунды), выше которого начисляется штраф
LATENCY_THRESHOLD_SEC: Final[float] = 0.01

# Масштаб штрафа: секунды → миллисекунды
LATENCY_PENALTY_SCALE: Final[float] = 1000.0


@dataclass(frozen=True)
class LatencyPolicy:
    """Порог и масштаб штрафа латентности."""

    threshold_seconds: float = LATENCY_THRESHOLD_SEC
    penalty_scale: float = LATENCY_PENALTY_SCALE

    def __post_init__(self):
        # NaN-порог молча отключил бы штраф (elapsed > nan всегда False)
        validate_non_negative(self.threshold_seconds, "threshold_seconds")
        validate_non_negative(self.penalty_scale, "penalty_scale")


DEFAULT_LATENCY_POLICY: Final[LatencyPolicy] = LatencyPolicy()


# =============================================================================
# MEASURE
# =============================================================================


class Measurement(NamedTuple):
    """Результат вычисления и его wall-clock длительность."""

    result: Any
    elapsed_seconds: float


def measure(computation: Callable[[], T]) -> Measurement:
    """
    Выполнить computation один раз и замерить wall-clock время.

    Без retry, без timeout. Исключение из computation пробрасывается
    без изменений (измерение не возвращается).

    Args:
        computation: Вычисление без аргументов

    Returns:
        Measurement(result, elapsed_seconds)
    """
    start = time.perf_counter()
    result = computation()
    elapsed = time.perf_counter() - start
    return Measurement(result, elapsed)


# =============================================================================
# PENALTY
# =============================================================================


def latency_penalty(elapsed_seconds: float, policy: LatencyPolicy | None = None) -> float:
    """
    Штраф латентности.

    Порог строгий: elapsed == threshold → 0.0.

    Examples:
        >>> latency_penalty(0.009)
        0.0
        >>> latency_penalty(0.02)
        20.0
    """
    policy = policy or DEFAULT_LATENCY_POLICY

    if elapsed_seconds > policy.threshold_seconds:
        return elapsed_seconds * policy.penalty_scale
    return 0.0
