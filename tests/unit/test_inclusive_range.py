"""
Тесты для InclusiveRange

Проверяет:
- Создание и валидацию границ
- Нарушение контракта при создании (не оборачивается в ValidationError)
- Immutability (frozen=True)
- check / require / contains
- JSON сериализацию
"""

import math

import pytest
from pydantic import ValidationError

from src.core.check import (
    InclusiveRange,
    OutOfRangeError,
    RangeContractViolation,
    is_out_of_range,
)


@pytest.fixture
def int_range() -> InclusiveRange[int]:
    return InclusiveRange[int](min_value=1, max_value=10)


@pytest.fixture
def unit_interval() -> InclusiveRange[float]:
    return InclusiveRange[float](min_value=0.0, max_value=1.0)


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestInclusiveRangeCreation:
    """Тесты создания InclusiveRange"""

    def test_valid(self, int_range: InclusiveRange[int]) -> None:
        assert int_range.min_value == 1
        assert int_range.max_value == 10

    def test_single_point(self) -> None:
        point = InclusiveRange[int](min_value=5, max_value=5)
        assert point.contains(5)
        assert not point.contains(4)

    def test_reversed_bounds_raise_contract_violation(self) -> None:
        with pytest.raises(RangeContractViolation, match="max < min"):
            InclusiveRange[int](min_value=10, max_value=1)

    def test_nan_bound_raises_contract_violation(self) -> None:
        with pytest.raises(RangeContractViolation, match="NaN"):
            InclusiveRange[float](min_value=math.nan, max_value=1.0)

        with pytest.raises(RangeContractViolation, match="NaN"):
            InclusiveRange[float](min_value=0.0, max_value=math.nan)

    def test_contract_violation_not_wrapped(self) -> None:
        """RangeContractViolation не превращается в ValidationError"""
        with pytest.raises(RangeContractViolation):
            try:
                InclusiveRange[int](min_value=10, max_value=1)
            except ValidationError:
                pytest.fail("RangeContractViolation wrapped in ValidationError")

    def test_invalid_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            InclusiveRange[int](min_value="low", max_value=10)

    def test_missing_field_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            InclusiveRange[int](min_value=1)

    def test_frozen(self, int_range: InclusiveRange[int]) -> None:
        with pytest.raises(ValidationError):
            int_range.min_value = 0


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


class TestInclusiveRangeCheck:
    """Тесты check / require / contains"""

    def test_check_in_range(self, int_range: InclusiveRange[int]) -> None:
        assert int_range.check(5) is None
        assert int_range.check(1) is None
        assert int_range.check(10) is None

    def test_check_out_of_range(self, int_range: InclusiveRange[int]) -> None:
        err = int_range.check(0)
        assert is_out_of_range(err)
        assert str(err) == "out-of-range (expected 1 <= actual <= 10, but actual=0)"

    def test_require(self, int_range: InclusiveRange[int]) -> None:
        int_range.require(7)
        with pytest.raises(OutOfRangeError):
            int_range.require(11)

    def test_contains(self, unit_interval: InclusiveRange[float]) -> None:
        assert unit_interval.contains(0.5)
        assert unit_interval.contains(0.0)
        assert unit_interval.contains(1.0)
        assert not unit_interval.contains(-0.1)
        assert not unit_interval.contains(1.1)

    def test_nan_actual_not_contained(self, unit_interval: InclusiveRange[float]) -> None:
        assert not unit_interval.contains(math.nan)
        assert is_out_of_range(unit_interval.check(math.nan))


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestInclusiveRangeSerialization:
    """JSON сериализация / десериализация"""

    def test_round_trip(self, int_range: InclusiveRange[int]) -> None:
        restored = InclusiveRange[int].model_validate_json(int_range.model_dump_json())
        assert restored == int_range

    def test_validate_reversed_json_raises_contract_violation(self) -> None:
        with pytest.raises(RangeContractViolation):
            InclusiveRange[int].model_validate_json('{"min_value": 10, "max_value": 1}')
