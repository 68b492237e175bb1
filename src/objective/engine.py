"""Objective Engine — adjusted Markowitz objective с латентностью

    objective = VaR + λ1·transaction_penalty + λ2·exposure_penalty + λ3·latency_penalty

где VaR = z·sqrt(wᵀΣw), а latency_penalty считается по wall-clock времени
расчёта самого VaR.

Порядок score:
1. Валидация коэффициентов и размерностей портфеля (до любой арифметики)
2. Consistency Gate → BLOCK: GateFailure (VaR не считается, время не меряется)
3. measure(VaR), штрафы, сумма → ScoreResult

Ошибки DimensionMismatch / ArithmeticDomainViolation пробрасываются без
изменений, частичный результат не возвращается.
"""

from typing import Sequence

from loguru import logger

from src.config.app_config import AppConfig
from src.core.domain.coefficients import Coefficients
from src.core.domain.market_observation import MarketObservation
from src.core.domain.portfolio import Portfolio
from src.core.domain.score_result import EngineState, GateFailure, ObjectiveOutcome, ScoreResult
from src.core.math.linear_algebra import DimensionMismatch
from src.core.math.penalties import exposure_penalty, transaction_penalty
from src.core.math.risk import ArithmeticDomainViolation, value_at_risk
from src.gatekeeper.gates.consistency_gate import ConsistencyGate
from src.observability.latency import DEFAULT_LATENCY_POLICY, LatencyPolicy, latency_penalty, measure


class ObjectiveEngine:
    """Оркестратор objective: gate → VaR (с замером) → штрафы → сумма.

    Состояния вызова: GATED → SCORED | ABORTED. Между вызовами состояние не
    хранится; портфель и observations только читаются.
    """

    def __init__(
        self,
        latency_policy: LatencyPolicy | None = None,
        consistency_gate: ConsistencyGate | None = None,
    ):
        """
        Args:
            latency_policy: порог/масштаб штрафа латентности (default: 10 ms / ×1000)
            consistency_gate: gate кросс-валидации (default: создается автоматически)
        """
        self.latency_policy = latency_policy or DEFAULT_LATENCY_POLICY
        self.consistency_gate = consistency_gate or ConsistencyGate()

    @classmethod
    def from_config(cls, config: AppConfig) -> "ObjectiveEngine":
        return cls(latency_policy=config.latency.to_policy())

    def score(
        self,
        portfolio: Portfolio,
        observations: Sequence[MarketObservation],
        tolerance: float,
        z: float,
        lambda1: float,
        lambda2: float,
        lambda3: float,
    ) -> ObjectiveOutcome:
        """Расчёт objective для одного снапшота портфеля.

        Args:
            portfolio: снапшот портфеля
            observations: котировки для consistency gate (непустой список)
            tolerance: допустимое отклонение котировок от среднего
            z: множитель доверия VaR
            lambda1: вес штрафа транзакционных издержек
            lambda2: вес штрафа экспозиции
            lambda3: вес штрафа латентности

        Returns:
            ScoreResult при PASS gate, GateFailure при BLOCK

        Raises:
            DimensionMismatch: размерности портфеля не согласованы или observations пуст
            ArithmeticDomainViolation: дисперсия портфеля отрицательна
            pydantic.ValidationError: недопустимые коэффициенты (λ < 0, NaN/Inf)
        """
        coefficients = Coefficients(z=z, lambda1=lambda1, lambda2=lambda2, lambda3=lambda3)
        return self.score_coefficients(portfolio, observations, tolerance, coefficients)

    def score_coefficients(
        self,
        portfolio: Portfolio,
        observations: Sequence[MarketObservation],
        tolerance: float,
        coefficients: Coefficients,
    ) -> ObjectiveOutcome:
        """score() для вызывающего кода, у которого уже есть Coefficients."""
        state = EngineState.GATED

        # 1. Размерности (до любой арифметики)
        portfolio.check_dimensions()

        # 2. Consistency Gate
        gate_result = self.consistency_gate.evaluate(observations, tolerance)

        if not gate_result.passed:
            state = EngineState.ABORTED
            logger.warning("Objective {}: consistency gate failed: {}", state.value, gate_result.details)
            return GateFailure(
                block_reason=gate_result.block_reason,
                mean_price=gate_result.mean_price,
                max_deviation=gate_result.max_deviation,
                tolerance=gate_result.tolerance,
                worst_source=gate_result.worst_source,
                details=gate_result.details,
            )

        logger.debug("Consistency gate passed: {}", gate_result.details)

        # 3. VaR под замером + штрафы
        try:
            var_term, elapsed = measure(
                lambda: value_at_risk(portfolio.weights, portfolio.cov_matrix, coefficients.z)
            )
            cost_term = transaction_penalty(portfolio.weights, portfolio.transaction_costs)
            exposure_term = exposure_penalty(portfolio.exposures)
        except (DimensionMismatch, ArithmeticDomainViolation) as e:
            logger.error("Objective aborted in {} state: {}", state.value, e)
            raise

        latency_term = latency_penalty(elapsed, self.latency_policy)

        value = (
            var_term
            + coefficients.lambda1 * cost_term
            + coefficients.lambda2 * exposure_term
            + coefficients.lambda3 * latency_term
        )
        state = EngineState.SCORED

        logger.debug(
            "Objective terms: var={:.6f}, cost={:.6f}, exposure={:.6f}, latency={:.6f} (elapsed={:.6f}s)",
            var_term,
            cost_term,
            exposure_term,
            latency_term,
            elapsed,
        )
        logger.info("Objective {}: value={:.6f}", state.value, value)

        return ScoreResult(
            value=value,
            elapsed_seconds=elapsed,
            var_term=var_term,
            cost_term=cost_term,
            exposure_term=exposure_term,
            latency_term=latency_term,
        )
