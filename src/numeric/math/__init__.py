"""
Core math modules

Числовые контракты (Real, Number), привязка встроенных скаляров и
численные safeguards для сравнения результатов.
"""

# Numerical Safeguards
from src.numeric.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    TWO_PI,
    is_close,
    is_valid_float,
    is_zero,
    normalize_phase,
    phases_close,
)

# Capabilities
from src.numeric.math.capabilities import (
    NativePairError,
    Number,
    Real,
)

# Coercion
from src.numeric.math.coercion import (
    NumberRef,
    Scalar,
    UnsupportedOperandError,
    as_number,
    imag,
    is_numeric,
    magnitude,
    phase,
    real,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "TWO_PI",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "is_zero",
    "normalize_phase",
    "phases_close",
    # Capabilities — Exceptions
    "NativePairError",
    # Capabilities — Types
    "Number",
    "Real",
    # Coercion — Exceptions
    "UnsupportedOperandError",
    # Coercion — Types
    "NumberRef",
    "Scalar",
    # Coercion — Functions
    "as_number",
    "imag",
    "is_numeric",
    "magnitude",
    "phase",
    "real",
]
