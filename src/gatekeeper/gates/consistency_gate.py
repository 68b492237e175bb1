"""Consistency Gate — кросс-валидация котировок между источниками

Обязательный gate перед расчётом objective: если источники рыночных данных
расходятся сильнее tolerance, данным нельзя доверять и score не считается.

Проверка:
    mean = Σ (price_k / K)
    PASS ⇔ ∀k: |price_k − mean| ≤ tolerance   (граница включительно)

Свойства:
- Не зависит от порядка observations
- Пустой список → DimensionMismatch (mean не определён), а не "vacuous PASS"
- Разные instrument в одном списке не блокируют (проверка чисто численная),
  но фиксируются в результате и логируются
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from src.core.domain.market_observation import MarketObservation
from src.core.math.linear_algebra import DimensionMismatch
from src.core.math.numerical_safeguards import validate_non_negative


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConsistencyGateResult:
    """Результат Consistency Gate."""

    passed: bool
    block_reason: str

    # Диагностика
    mean_price: float
    max_deviation: float
    tolerance: float
    worst_source: Optional[str]  # источник с максимальным отклонением
    instruments: tuple[str, ...]

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConsistencyGateConfig:
    """Конфигурация Consistency Gate."""

    # Логировать WARNING, если observations относятся к разным инструментам
    warn_on_mixed_instruments: bool = True


# =============================================================================
# GATE
# =============================================================================


class ConsistencyGate:
    """Consistency Gate: котировки всех источников в пределах tolerance от среднего.

    Порядок:
    1. Валидация входов (непустой список, tolerance ≥ 0)
    2. Среднее по ценам
    3. Максимальное абсолютное отклонение
    4. PASS/BLOCK
    """

    def __init__(self, config: ConsistencyGateConfig | None = None):
        self.config = config or ConsistencyGateConfig()

    def evaluate(
        self,
        observations: Sequence[MarketObservation],
        tolerance: float,
    ) -> ConsistencyGateResult:
        """Оценка консистентности котировок.

        Args:
            observations: котировки одного инструмента от разных источников
            tolerance: допустимое абсолютное отклонение от среднего

        Returns:
            ConsistencyGateResult

        Raises:
            DimensionMismatch: если observations пуст
            ValueError: если tolerance < 0 или NaN/Inf
        """
        if len(observations) == 0:
            raise DimensionMismatch(
                "Consistency check requires at least one observation (mean of empty set)"
            )
        validate_non_negative(tolerance, "tolerance")

        # Деление до суммирования: Σp для цен порядка 1e308 переполняется в inf
        n = len(observations)
        mean_price = math.fsum(obs.price / n for obs in observations)

        max_deviation = 0.0
        worst_source: Optional[str] = None
        all_within = True
        for obs in observations:
            deviation = abs(obs.price - mean_price)
            if deviation > tolerance:
                all_within = False
            if worst_source is None or deviation > max_deviation:
                max_deviation = deviation
                worst_source = obs.source

        instruments = tuple(sorted({obs.instrument for obs in observations}))
        if len(instruments) > 1 and self.config.warn_on_mixed_instruments:
            logger.warning(
                "Consistency gate: observations quote {} different instruments: {}",
                len(instruments),
                ", ".join(instruments),
            )

        if not all_within:
            return ConsistencyGateResult(
                passed=False,
                block_reason="price_deviation_exceeds_tolerance",
                mean_price=mean_price,
                max_deviation=max_deviation,
                tolerance=tolerance,
                worst_source=worst_source,
                instruments=instruments,
                details=(
                    f"BLOCK: max_deviation={max_deviation:.8f} > tolerance={tolerance:.8f} "
                    f"(source={worst_source}, mean={mean_price:.8f}, n={len(observations)})"
                ),
            )

        return ConsistencyGateResult(
            passed=True,
            block_reason="",
            mean_price=mean_price,
            max_deviation=max_deviation,
            tolerance=tolerance,
            worst_source=worst_source,
            instruments=instruments,
            details=(
                f"PASS: max_deviation={max_deviation:.8f} <= tolerance={tolerance:.8f} "
                f"(mean={mean_price:.8f}, n={len(observations)})"
            ),
        )


def check_consistency(
    observations: Sequence[MarketObservation],
    tolerance: float,
) -> bool:
    """
    True, если каждая котировка в пределах tolerance от среднего.

    Raises:
        DimensionMismatch: если observations пуст
    """
    return ConsistencyGate().evaluate(observations, tolerance).passed
