"""
Тесты для Coercion — привязка скаляров и forwarding-ссылки

Проверяет:
1. Scalar: real = float(value), imag = 0 для всех встроенных скаляров
2. as_number: идентичность для Real/Number, complex → Cartesian
3. Свободные аксессоры real/imag/magnitude/phase
4. NumberRef: результаты идентичны результатам target
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from src.numeric.domain import Cartesian, Polar
from src.numeric.math.capabilities import Number, Real
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

# =============================================================================
# SCALAR
# =============================================================================


class TestScalar:
    """Тесты для Scalar"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, 0.0),
            (7, 7.0),
            (-3, -3.0),
            (2**70, float(2**70)),
            (True, 1.0),
            (1.5, 1.5),
            (Fraction(1, 8), 0.125),
            (Decimal("-2.25"), -2.25),
        ],
    )
    def test_real_is_float_cast(self, value: object, expected: float) -> None:
        s = Scalar(value)
        assert s.real() == expected
        assert isinstance(s.real(), float)
        assert s.imag() == 0.0

    @pytest.mark.parametrize("x", [0.0, 2.0, 1e-300, 5.5])
    def test_non_negative_magnitude_phase(self, x: float) -> None:
        assert Scalar(x).magnitude() == x
        assert Scalar(x).phase() == 0.0

    @pytest.mark.parametrize("x", [-0.0, -2.0, -1e-300, -5.5])
    def test_negative_magnitude_phase(self, x: float) -> None:
        assert Scalar(x).magnitude() == abs(x)
        assert Scalar(x).phase() == math.pi

    def test_both_capabilities(self) -> None:
        s = Scalar(1)
        assert isinstance(s, Real)
        assert isinstance(s, Number)

    def test_arithmetic_with_complex_operand(self) -> None:
        assert Scalar(2).add(Cartesian(1.0, 1.0)) == Cartesian(3.0, 1.0)
        assert Scalar(2).cartesian_mul(Cartesian(1.0, 1.0)) == Cartesian(2.0, 2.0)

    def test_nan_propagates(self) -> None:
        s = Scalar(math.nan)
        assert math.isnan(s.real())
        assert math.isnan(s.magnitude())

    def test_out_of_range_saturates_to_inf(self) -> None:
        """Значения вне диапазона double насыщаются до ±Inf"""
        assert Scalar(10**400).real() == math.inf
        assert Scalar(-(10**400)).real() == -math.inf
        assert Scalar(Fraction(10**400, 3)).real() == math.inf
        assert Scalar(10**400).magnitude() == math.inf
        assert Scalar(-(10**400)).phase() == math.pi

    def test_value_semantics(self) -> None:
        assert Scalar(2) == Scalar(2)
        assert hash(Scalar(2)) == hash(Scalar(2))


# =============================================================================
# AS_NUMBER
# =============================================================================


class TestAsNumber:
    """Тесты для as_number / is_numeric"""

    def test_number_returned_unchanged(self) -> None:
        z = Cartesian(1.0, 2.0)
        assert as_number(z) is z

        p = Polar(1.0, 2.0)
        assert as_number(p) is p

    def test_scalar_wrapped(self) -> None:
        assert as_number(3) == Scalar(3)

    def test_builtin_complex_to_cartesian(self) -> None:
        z = as_number(3 + 4j)
        assert z == Cartesian(3.0, 4.0)
        assert z.magnitude() == 5.0

    @pytest.mark.parametrize("value", ["1", None, [1.0], object()])
    def test_unsupported_raises(self, value: object) -> None:
        assert not is_numeric(value)
        with pytest.raises(UnsupportedOperandError):
            as_number(value)

    def test_unsupported_error_is_type_error(self) -> None:
        assert issubclass(UnsupportedOperandError, TypeError)


class TestFreeAccessors:
    """Тесты свободных аксессоров"""

    def test_builtin_real(self) -> None:
        assert real(-4) == -4.0
        assert imag(-4) == 0.0
        assert magnitude(-4) == 4.0
        assert phase(-4) == math.pi

    def test_builtin_complex(self) -> None:
        assert real(1j) == 0.0
        assert imag(1j) == 1.0
        assert phase(1j) == math.pi / 2

    def test_composite(self) -> None:
        assert magnitude(Cartesian(3.0, 4.0)) == 5.0
        assert phase(Polar(1.0, 0.3)) == 0.3


# =============================================================================
# NUMBER REF
# =============================================================================

TARGETS = [
    Cartesian(3.0, 4.0),
    Cartesian(-1.0, 0.0),
    Polar(2.0, 1.0),
    Scalar(-2),
    -0.0,
    5,
    1 + 1j,
]


class TestNumberRef:
    """Тесты forwarding-ссылки"""

    @pytest.mark.parametrize("target", TARGETS)
    def test_accessors_identical(self, target: object) -> None:
        ref = NumberRef(target)
        assert ref.real() == real(target)
        assert ref.imag() == imag(target)
        assert ref.magnitude() == magnitude(target)
        assert ref.phase() == phase(target)

    @pytest.mark.parametrize("target", TARGETS)
    def test_derived_operations_identical(self, target: object) -> None:
        ref = NumberRef(target)
        other = Polar(1.5, -0.25)
        number = as_number(target)
        assert ref.mul(other) == number.mul(other)
        assert ref.div(other) == number.div(other)
        assert ref.add(other) == number.add(other)

    def test_chained_refs(self) -> None:
        z = Polar(2.0, 0.75)
        ref = NumberRef(NumberRef(z))
        assert ref.magnitude() == 2.0
        assert ref.phase() == 0.75
        assert ref.real() == z.real()

    def test_ref_as_operand_and_component(self) -> None:
        z = Cartesian(1.0, 2.0)
        ref = NumberRef(z)
        assert Cartesian(1.0, 0.0).add(ref) == Cartesian(2.0, 2.0)
        assert Cartesian(ref, 0.0).real() == 1.0

    def test_aliasing_is_forwarding(self) -> None:
        """Обычная ссылка Python даёт те же результаты"""
        z = Cartesian(3.0, 4.0)
        alias = z
        assert alias.magnitude() == z.magnitude()
        assert alias.phase() == z.phase()
