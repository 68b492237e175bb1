"""
Результаты ObjectiveEngine

Вызов score заканчивается ровно одним из двух исходов:
- ScoreResult  — gate пройден, objective посчитан (state SCORED)
- GateFailure  — рыночные данные неконсистентны, score не считался (state ABORTED)

GateFailure — не исключение, а типизированный ответ "score нет";
вызывающий код обязан различать исходы до использования числа.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class EngineState(str, Enum):
    """
    Состояние вызова score.

    GATED → SCORED (pass) | GATED → ABORTED (gate fail). Других переходов нет.
    """

    GATED = "GATED"
    SCORED = "SCORED"
    ABORTED = "ABORTED"


@dataclass(frozen=True)
class ScoreResult:
    """Результат успешного расчёта objective."""

    value: float
    elapsed_seconds: float

    # Разложение objective (до умножения на λ)
    var_term: float
    cost_term: float
    exposure_term: float
    latency_term: float

    state: EngineState = EngineState.SCORED


@dataclass(frozen=True)
class GateFailure:
    """Маркер отказа consistency gate (score не вычислялся)."""

    block_reason: str
    mean_price: float
    max_deviation: float
    tolerance: float
    worst_source: Optional[str]

    details: str

    state: EngineState = EngineState.ABORTED


ObjectiveOutcome = Union[ScoreResult, GateFailure]
