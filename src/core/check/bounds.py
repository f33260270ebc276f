"""
InclusiveRange — Immutable модель включительного диапазона

Переиспользуемая пара границ [min_value, max_value] для числовых значений.
Корректность границ проверяется при создании той же функцией, что и в
check_in_range, поэтому некорректный диапазон не может существовать.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from src.core.check.errors import OutOfRangeError
from src.core.check.range_check import check_in_range, validate_bounds

N = TypeVar("N", int, float)


class InclusiveRange(BaseModel, Generic[N]):
    """
    Включительный диапазон [min_value, max_value].

    RangeContractViolation при NaN границе или max_value < min_value
    пробрасывается как есть (pydantic оборачивает в ValidationError только
    ValueError / AssertionError). Неверные типы полей → ValidationError.

    Examples:
        >>> scale = InclusiveRange[int](min_value=1, max_value=10)
        >>> scale.contains(10)
        True
        >>> str(scale.check(0))
        'out-of-range (expected 1 <= actual <= 10, but actual=0)'
    """

    min_value: N = Field(..., description="Нижняя граница (включительно)")
    max_value: N = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self) -> "InclusiveRange[N]":
        validate_bounds(self.min_value, self.max_value)
        return self

    def check(self, actual: N) -> OutOfRangeError | None:
        """
        Проверка min_value <= actual <= max_value.

        Returns:
            None если значение в диапазоне, иначе OutOfRangeError
        """
        return check_in_range(actual, self.min_value, self.max_value)

    def require(self, actual: N) -> None:
        """
        Как check, но бросает OutOfRangeError.

        Raises:
            OutOfRangeError: Если значение вне диапазона
        """
        err = self.check(actual)
        if err is not None:
            raise err

    def contains(self, actual: N) -> bool:
        return self.check(actual) is None
