"""
Cartesian — Декартово представление числа

Immutable Pydantic модель: нативная пара real/imag хранится в полях re/im,
magnitude/phase выводятся (sqrt(re² + im²), atan2(im, re)).

Компоненты могут быть любыми числами (float, int, Scalar, Polar, ...).
От каждого компонента берётся ТОЛЬКО real(), поле im задаёт масштаб мнимой
единицы, собственная мнимая часть компонента отбрасывается.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from src.numeric.math.capabilities import Number
from src.numeric.math.coercion import as_number, is_numeric

R = TypeVar("R")
I = TypeVar("I")


class Cartesian(BaseModel, Number, Generic[R, I]):
    """
    Число в форме re + i·im.

    Immutable модель (frozen=True): равенство и хэш структурные (по полям),
    порядок лексикографический (re, затем im) и определён только если
    компоненты сами сравнимы.

    Examples:
        >>> z = Cartesian(3.0, 4.0)
        >>> z.magnitude()
        5.0
    """

    re: R = Field(default=0.0, description="Вещественная ось")
    im: I = Field(default=0.0, description="Мнимая ось (масштаб i)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, re: Any = 0.0, im: Any = 0.0, **data: Any) -> None:
        super().__init__(re=re, im=im, **data)

    @field_validator("re", "im")
    @classmethod
    def validate_component(cls, v: Any) -> Any:
        """Компонент должен быть числом."""
        if not is_numeric(v):
            raise ValueError(f"component must be numeric, got {type(v).__name__}")
        return v

    # -------------------------------------------------------------------------
    # Нативная пара
    # -------------------------------------------------------------------------

    def real(self) -> float:
        return as_number(self.re).real()

    def imag(self) -> float:
        return as_number(self.im).real()

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Cartesian):
            return NotImplemented
        return (self.re, self.im) < (other.re, other.im)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Cartesian):
            return NotImplemented
        return (self.re, self.im) <= (other.re, other.im)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Cartesian):
            return NotImplemented
        return (self.re, self.im) > (other.re, other.im)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Cartesian):
            return NotImplemented
        return (self.re, self.im) >= (other.re, other.im)
