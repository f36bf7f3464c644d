"""
Capabilities — Real и Number

Два контракта, через которые код работает с любой числовой величиной:

- Real: минимальный контракт. Обязателен только real(), остальные
  аксессоры выводятся в предположении, что число вещественное
  (imag = 0, magnitude = |real|, phase ∈ {0, π}).
- Number: complex-capable контракт. Тип хранит ОДНУ нативную пару
  (real/imag ЛИБО magnitude/phase), вторая пара всегда выводится.
  Поверх аксессоров определена бинарная арифметика.

ФОРМУЛЫ:
    real      = magnitude * cos(phase)
    imag      = magnitude * sin(phase)
    magnitude = sqrt(real² + imag²)
    phase     = atan2(imag, real)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не мутирует операнды: результат всегда новый объект
2. add/sub/cartesian_mul → Cartesian, polar_mul/mul/div → Polar
3. Деление на ноль даёт Inf/NaN по IEEE 754, исключений нет
4. Никакого разделяемого состояния (кэшей): потокобезопасно без блокировок
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from src.numeric.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
)

if TYPE_CHECKING:
    from src.numeric.domain.cartesian import Cartesian
    from src.numeric.domain.polar import Polar

logger = logging.getLogger(__name__)

_CARTESIAN_PAIR = ("real", "imag")
_POLAR_PAIR = ("magnitude", "phase")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NativePairError(TypeError):
    """
    Подкласс Number не предоставляет ни одной нативной пары.

    Без нативной пары аксессоры по умолчанию определены друг через друга
    и уходят в бесконечную рекурсию, поэтому ошибка поднимается уже при
    создании класса.
    """


# =============================================================================
# REAL
# =============================================================================


class Real(ABC):
    """
    Вещественное число: обязателен только real().

    Фаза отрицательного числа (включая -0.0) равна π, иначе 0.
    """

    @abstractmethod
    def real(self) -> float:
        """Вещественная часть"""

    def imag(self) -> float:
        return 0.0

    def magnitude(self) -> float:
        return abs(self.real())

    def phase(self) -> float:
        if math.copysign(1.0, self.real()) < 0:
            return math.pi
        return 0.0

    # -------------------------------------------------------------------------
    # Вещественная арифметика
    # -------------------------------------------------------------------------

    def add_real(self, rhs: Any) -> float:
        """Сумма вещественных частей"""
        return self.real() + _operand(rhs).real()

    def sub_real(self, rhs: Any) -> float:
        """Разность вещественных частей"""
        return self.real() - _operand(rhs).real()

    def mul_real(self, rhs: Any) -> float:
        """Произведение вещественных частей"""
        return self.real() * _operand(rhs).real()

    def div_real(self, rhs: Any) -> float:
        """
        Частное вещественных частей.

        Деление на ноль даёт ±Inf или NaN (IEEE 754), ZeroDivisionError
        Python не пропагирует.
        """
        return _ieee_divide(self.real(), _operand(rhs).real())

    def cartesian_mul(self, rhs: Any) -> "Cartesian":
        """
        Произведение вещественного числа на complex-capable число.

        Returns:
            Cartesian(real * rhs.real(), real * rhs.imag())
        """
        from src.numeric.domain.cartesian import Cartesian

        other = _operand(rhs)
        scale = self.real()
        return Cartesian(scale * other.real(), scale * other.imag())


# =============================================================================
# NUMBER
# =============================================================================


class Number(ABC):
    """
    Complex-capable число.

    Реализация обязана переопределить real()+imag() ИЛИ magnitude()+phase().
    Проверка выполняется в __init_subclass__ и поднимает NativePairError.

    Операнд бинарных операций: любой Number, Real или встроенный скаляр
    (int, float, Fraction, Decimal, complex, numpy scalar).
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        native = [
            pair
            for pair in (_CARTESIAN_PAIR, _POLAR_PAIR)
            if all(getattr(cls, name) is not getattr(Number, name) for name in pair)
        ]
        if not native:
            raise NativePairError(
                f"{cls.__name__} must implement real()+imag() or magnitude()+phase()"
            )

        logger.debug(
            "Registered Number implementation %s (native: %s)",
            cls.__qualname__,
            ", ".join("/".join(pair) for pair in native),
        )

    # -------------------------------------------------------------------------
    # Аксессоры (каждый выводится из противоположной пары)
    # -------------------------------------------------------------------------

    def real(self) -> float:
        """Вещественная часть: magnitude * cos(phase)"""
        return self.magnitude() * _ieee_cos(self.phase())

    def imag(self) -> float:
        """Мнимая часть: magnitude * sin(phase)"""
        return self.magnitude() * _ieee_sin(self.phase())

    def magnitude(self) -> float:
        """
        Модуль: sqrt(real² + imag²).

        math.hypot не переполняется на промежуточных квадратах и даёт Inf
        вместо OverflowError.
        """
        return math.hypot(self.real(), self.imag())

    def phase(self) -> float:
        """Фаза в радианах: atan2(imag, real)"""
        return math.atan2(self.imag(), self.real())

    # -------------------------------------------------------------------------
    # Арифметика в декартовой форме
    # -------------------------------------------------------------------------

    def add(self, rhs: Any) -> "Cartesian":
        """Покомпонентная сумма. Сложение определено только в декартовой форме."""
        from src.numeric.domain.cartesian import Cartesian

        other = _operand(rhs)
        return Cartesian(self.real() + other.real(), self.imag() + other.imag())

    def sub(self, rhs: Any) -> "Cartesian":
        """Покомпонентная разность."""
        from src.numeric.domain.cartesian import Cartesian

        other = _operand(rhs)
        return Cartesian(self.real() - other.real(), self.imag() - other.imag())

    def cartesian_mul(self, rhs: Any) -> "Cartesian":
        """
        Произведение, раскрытое в декартовых координатах.

        (a + bi)(c + di) = (ac - bd) + (ad + bc)i

        Математически равно polar_mul, но численно это другой путь.
        """
        from src.numeric.domain.cartesian import Cartesian

        other = _operand(rhs)
        a, b = self.real(), self.imag()
        c, d = other.real(), other.imag()
        return Cartesian(a * c - b * d, a * d + b * c)

    # -------------------------------------------------------------------------
    # Арифметика в полярной форме
    # -------------------------------------------------------------------------

    def polar_mul(self, rhs: Any) -> "Polar":
        """Произведение: модули перемножаются, фазы складываются."""
        from src.numeric.domain.polar import Polar

        other = _operand(rhs)
        return Polar(
            self.magnitude() * other.magnitude(),
            self.phase() + other.phase(),
        )

    def mul(self, rhs: Any) -> "Polar":
        """Каноническое умножение (= polar_mul)."""
        return self.polar_mul(rhs)

    def div(self, rhs: Any) -> "Polar":
        """
        Частное: модули делятся, фазы вычитаются.

        Фаза результата не нормализуется. Делитель с нулевым модулем даёт
        magnitude = Inf (или NaN для 0/0) без исключения.
        """
        from src.numeric.domain.polar import Polar

        other = _operand(rhs)
        return Polar(
            _ieee_divide(self.magnitude(), other.magnitude()),
            self.phase() - other.phase(),
        )

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Cartesian":
        from src.numeric.domain.cartesian import Cartesian

        return Cartesian(self.real(), -self.imag())

    def to_cartesian(self) -> "Cartesian":
        """Явная конверсия в Cartesian(float, float)."""
        from src.numeric.domain.cartesian import Cartesian

        return Cartesian(self.real(), self.imag())

    def to_polar(self) -> "Polar":
        """Явная конверсия в Polar(float, float)."""
        from src.numeric.domain.polar import Polar

        return Polar(self.magnitude(), self.phase())

    def is_close(
        self,
        other: Any,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение двух чисел по декартовым координатам с толерантностью.

        Работает для любых представлений (Cartesian vs Polar vs скаляр).
        """
        rhs = _operand(other)
        return math.isclose(
            self.real(), rhs.real(), rel_tol=rel_tol, abs_tol=abs_tol
        ) and math.isclose(self.imag(), rhs.imag(), rel_tol=rel_tol, abs_tol=abs_tol)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(self.real(), self.imag())

    def __abs__(self) -> float:
        return self.magnitude()

    def __neg__(self) -> "Cartesian":
        from src.numeric.domain.cartesian import Cartesian

        return Cartesian(-self.real(), -self.imag())

    def __add__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return _left_operand(other).add(self)

    def __sub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return _left_operand(other).sub(self)

    def __mul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return _left_operand(other).mul(self)

    def __truediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return _left_operand(other).div(self)


# =============================================================================
# HELPERS
# =============================================================================


def _operand(value: Any) -> Any:
    from src.numeric.math.coercion import as_number

    return as_number(value)


def _left_operand(value: Any) -> "Number":
    """Левый операнд отражённого оператора как Number (Real-only оборачивается)."""
    from src.numeric.math.coercion import NumberRef

    number = _operand(value)
    if isinstance(number, Number):
        return number
    return NumberRef(number)


def _is_operand(value: Any) -> bool:
    from src.numeric.math.coercion import is_numeric

    return is_numeric(value)


def _ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float по семантике IEEE 754.

    Python поднимает ZeroDivisionError для x / 0.0; здесь вместо этого
    возвращается ±Inf (знак по знакам операндов) или NaN для 0/0 и NaN/0.
    """
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _ieee_cos(angle: float) -> float:
    """cos по IEEE 754: для ±Inf возвращает NaN вместо ValueError."""
    if math.isinf(angle):
        return math.nan
    return math.cos(angle)


def _ieee_sin(angle: float) -> float:
    """sin по IEEE 754: для ±Inf возвращает NaN вместо ValueError."""
    if math.isinf(angle):
        return math.nan
    return math.sin(angle)
