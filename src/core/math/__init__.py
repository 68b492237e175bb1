"""
Core math modules

Линейная алгебра, модель риска и штрафы objective.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_valid_float,
    validate_finite,
    validate_finite_vector,
    validate_non_negative,
)

# Linear Algebra Kernel
from src.core.math.linear_algebra import (
    DimensionMismatch,
    check_same_length,
    check_square,
    dot,
    mat_vec_mul,
)

# Risk Model
from src.core.math.risk import (
    ArithmeticDomainViolation,
    portfolio_variance,
    quadratic_form,
    value_at_risk,
)

# Penalty Model
from src.core.math.penalties import (
    exposure_penalty,
    transaction_penalty,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    "validate_finite",
    "validate_finite_vector",
    "validate_non_negative",
    # Linear Algebra — Exceptions
    "DimensionMismatch",
    # Linear Algebra — Functions
    "check_same_length",
    "check_square",
    "dot",
    "mat_vec_mul",
    # Risk — Exceptions
    "ArithmeticDomainViolation",
    # Risk — Functions
    "portfolio_variance",
    "quadratic_form",
    "value_at_risk",
    # Penalties
    "exposure_penalty",
    "transaction_penalty",
]
