"""
Numerical Safeguards — сравнения float и работа с фазой

Модуль содержит вспомогательные функции для сравнения результатов
вычислений с учётом машинной точности:
- Epsilon-сравнения float (абсолютная + относительная толерантность)
- Нормализация фазы в полуинтервал (-π, π]
- Сравнение фаз по модулю 2π

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции НЕ санитизируют NaN/Inf: арифметика пропагирует их по IEEE 754
2. Функции никогда не бросают исключений для NaN/Inf входов
3. Все операции детерминированы и не имеют состояния
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Нужна для значений около нуля, например imag() у cos(π/2)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Полный оборот в радианах
TWO_PI: Final[float] = 2.0 * math.pi


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Бесконечности равны только самим себе, NaN не равен ничему.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol"""
    return abs(value) <= tol


# =============================================================================
# ФАЗА
# =============================================================================


def normalize_phase(phase: float) -> float:
    """
    Приведение фазы к полуинтервалу (-π, π].

    Фаза в результатах polar_mul/div НЕ нормализуется (phase = a + b),
    поэтому для сравнения её нужно привести к каноническому виду.

    Args:
        phase: Фаза в радианах (любая)

    Returns:
        Эквивалентная фаза в (-π, π]; NaN/Inf возвращаются как NaN

    Examples:
        >>> normalize_phase(3 * math.pi / 2)
        -1.5707963267948966
        >>> normalize_phase(-math.pi)
        3.141592653589793
    """
    if not is_valid_float(phase):
        return math.nan

    wrapped = math.fmod(phase, TWO_PI)

    if wrapped > math.pi:
        wrapped -= TWO_PI
    elif wrapped <= -math.pi:
        wrapped += TWO_PI

    return wrapped


def phases_close(
    a: float,
    b: float,
    abs_tol: float = EPS_FLOAT_COMPARE_REL,
) -> bool:
    """
    Сравнение двух фаз по модулю 2π.

    Сравнивается кратчайшее угловое расстояние между фазами, поэтому
    π и -π (а также 0 и 2π) считаются равными.

    Args:
        a: Первая фаза (радианы)
        b: Вторая фаза (радианы)
        abs_tol: Допустимое угловое расстояние (радианы)

    Returns:
        True если фазы эквивалентны с учётом толерантности
    """
    diff = normalize_phase(a - b)
    if math.isnan(diff):
        return False
    return abs(diff) <= abs_tol
