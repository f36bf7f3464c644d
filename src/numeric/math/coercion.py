"""
Coercion — привязка встроенных скаляров и forwarding-ссылки

Делает любое встроенное число пригодным везде, где ожидается Real или
Number, без явной обёртки на стороне вызывающего кода:

- Scalar: адаптер для int, float, bool, Fraction, Decimal и numpy-скаляров
  (real = float(value), imag = 0)
- complex: отображается в Cartesian(z.real, z.imag)
- NumberRef: делегирующая ссылка на другое число

Свободные функции real/imag/magnitude/phase принимают всё, что принимает
as_number().
"""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from src.numeric.math.capabilities import Number, Real


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedOperandError(TypeError):
    """Значение не является числом и не может участвовать в арифметике."""


# =============================================================================
# SCALAR BINDING
# =============================================================================


@dataclass(frozen=True)
class Scalar(Real, Number):
    """
    Встроенный скаляр как чисто вещественное число.

    Исходное значение хранится как есть; float(value) вычисляется при
    каждом обращении (сужение/расширение до double). Значения за пределами
    диапазона double (например, int 10**400) насыщаются до ±Inf.
    """

    value: Any

    def real(self) -> float:
        try:
            return float(self.value)
        except OverflowError:
            return math.inf if self.value > 0 else -math.inf

    def imag(self) -> float:
        return 0.0


# =============================================================================
# REFERENCE FORWARDING
# =============================================================================


@dataclass(frozen=True)
class NumberRef(Number):
    """
    Делегирующая ссылка: все аксессоры перенаправляются в target.

    Производные операции (add, mul, div, ...) строятся из аксессоров,
    поэтому результаты идентичны результатам самого target.
    """

    target: Any

    def real(self) -> float:
        return as_number(self.target).real()

    def imag(self) -> float:
        return as_number(self.target).imag()

    def magnitude(self) -> float:
        return as_number(self.target).magnitude()

    def phase(self) -> float:
        return as_number(self.target).phase()


# =============================================================================
# COERCION
# =============================================================================


def is_numeric(value: Any) -> bool:
    """True если as_number(value) не бросит исключение."""
    return isinstance(value, (Real, Number, complex, numbers.Real, Decimal))


def as_number(value: Any) -> Any:
    """
    Приведение значения к объекту с аксессорами real/imag/magnitude/phase.

    Args:
        value: Real, Number или встроенное число

    Returns:
        - Real/Number: тот же объект (без копии)
        - complex: Cartesian(value.real, value.imag)
        - прочие скаляры: Scalar(value)

    Raises:
        UnsupportedOperandError: Если значение не является числом
    """
    if isinstance(value, (Real, Number)):
        return value

    if isinstance(value, complex):
        from src.numeric.domain.cartesian import Cartesian

        return Cartesian(value.real, value.imag)

    if isinstance(value, (numbers.Real, Decimal)):
        return Scalar(value)

    raise UnsupportedOperandError(
        f"Unsupported numeric operand of type {type(value).__name__}: {value!r}"
    )


# =============================================================================
# FREE ACCESSORS
# =============================================================================


def real(value: Any) -> float:
    """Вещественная часть любого числа."""
    return as_number(value).real()


def imag(value: Any) -> float:
    """Мнимая часть любого числа (0.0 для вещественных скаляров)."""
    return as_number(value).imag()


def magnitude(value: Any) -> float:
    return as_number(value).magnitude()


def phase(value: Any) -> float:
    return as_number(value).phase()
