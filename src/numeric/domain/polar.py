"""
Polar — Полярное представление числа

Immutable Pydantic модель: нативная пара magnitude/phase хранится в полях
r/theta (радианы), real/imag выводятся тригонометрически:

    real = r · cos(theta)
    imag = r · sin(theta)

Фаза хранится как есть и не нормализуется.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from src.numeric.math.capabilities import Number
from src.numeric.math.coercion import as_number, is_numeric

M = TypeVar("M")
P = TypeVar("P")


class Polar(BaseModel, Number, Generic[M, P]):
    """
    Число в форме r · e^{i·theta}.

    Immutable модель (frozen=True), структурное равенство по (r, theta):
    Polar(1, 0) и Polar(1, 2π) обозначают одно число, но не равны.
    Для сравнения значений используйте is_close().
    """

    r: M = Field(default=0.0, description="Модуль")
    theta: P = Field(default=0.0, description="Фаза (радианы)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, r: Any = 0.0, theta: Any = 0.0, **data: Any) -> None:
        super().__init__(r=r, theta=theta, **data)

    @field_validator("r", "theta")
    @classmethod
    def validate_component(cls, v: Any) -> Any:
        """Компонент должен быть числом."""
        if not is_numeric(v):
            raise ValueError(f"component must be numeric, got {type(v).__name__}")
        return v

    def magnitude(self) -> float:
        return as_number(self.r).real()

    def phase(self) -> float:
        return as_number(self.theta).real()

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Polar):
            return NotImplemented
        return (self.r, self.theta) < (other.r, other.theta)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Polar):
            return NotImplemented
        return (self.r, self.theta) <= (other.r, other.theta)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Polar):
            return NotImplemented
        return (self.r, self.theta) > (other.r, other.theta)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Polar):
            return NotImplemented
        return (self.r, self.theta) >= (other.r, other.theta)
