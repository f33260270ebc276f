"""
Range Check — проверка значений и индексов на попадание в диапазон

Модуль предоставляет две проверки поверх общего сравнения "меньше":
- check_in_range: min <= actual <= max (включительно)
- check_index: 0 <= index < len(sequence)

Функции не бросают исключение при выходе за границы, а возвращают
OutOfRangeError (или None при успехе). Для exception flow есть
require_in_range / require_index.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Используется только оператор < (корректно для частичных порядков, например float)
2. Граница NaN или max < min → RangeContractViolation (не OutOfRangeError)
3. NaN в actual при валидных границах → OutOfRangeError (NaN меньше любого
   не-NaN значения; для Decimal NaN проверяется до сравнения, без InvalidOperation)
4. Пустая последовательность → OutOfRangeError с диапазоном "0 <= actual < 0"
5. Нет состояния и побочных эффектов, функции реентерабельны
"""

import operator
from collections.abc import Sized
from typing import Any, Final, Protocol, TypeVar

from src.core.check.errors import (
    CONTRACT_MAX_LESS_THAN_MIN_MSG,
    CONTRACT_NAN_BOUNDARY_MSG,
    OutOfRangeError,
    RangeContractViolation,
)

# =============================================================================
# ШАБЛОНЫ СООБЩЕНИЙ
# =============================================================================

OUT_OF_RANGE_MSG: Final[str] = (
    "out-of-range (expected {min_value} <= actual <= {max_value}, but actual={actual})"
)

# Пустая последовательность: диапазон сообщается буквально как 0 <= actual < 0
EMPTY_SEQUENCE_MSG: Final[str] = "out-of-range (expected 0 <= actual < 0, but actual={actual})"


# =============================================================================
# ТИПЫ
# =============================================================================


class SupportsLessThan(Protocol):
    """Любой тип с оператором < (int, float, Decimal, str, datetime, ...)."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


# =============================================================================
# ПРОВЕРКА ГРАНИЦ
# =============================================================================


def _is_nan(value: Any) -> bool:
    # NaN: единственное значение, не равное самому себе
    return value != value


def validate_bounds(min_value: SupportsLessThan, max_value: SupportsLessThan) -> None:
    """
    Проверка корректности диапазона [min_value, max_value].

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница

    Raises:
        RangeContractViolation: Если граница NaN или max_value < min_value
    """
    if _is_nan(max_value) or _is_nan(min_value):
        raise RangeContractViolation(CONTRACT_NAN_BOUNDARY_MSG)

    if max_value < min_value:
        raise RangeContractViolation(CONTRACT_MAX_LESS_THAN_MIN_MSG)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def check_in_range(actual: T, min_value: T, max_value: T) -> OutOfRangeError | None:
    """
    Проверка min_value <= actual <= max_value.

    Args:
        actual: Проверяемое значение
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (включительно)

    Returns:
        None если значение в диапазоне, иначе OutOfRangeError

    Raises:
        RangeContractViolation: Если граница NaN или max_value < min_value

    Examples:
        >>> check_in_range(5, 1, 10) is None
        True
        >>> str(check_in_range(0, 1, 10))
        'out-of-range (expected 1 <= actual <= 10, but actual=0)'
    """
    validate_bounds(min_value, max_value)

    if _is_nan(actual) or actual < min_value or max_value < actual:
        return OutOfRangeError(
            OUT_OF_RANGE_MSG.format(min_value=min_value, max_value=max_value, actual=actual)
        )

    return None


def check_index(index: Any, sequence: Sized) -> OutOfRangeError | None:
    """
    Проверка, что index допустим для sequence: 0 <= index < len(sequence).

    Отрицательные индексы не поддерживаются (в отличие от индексации list).

    Args:
        index: Целочисленный индекс (int или объект с __index__)
        sequence: Последовательность произвольных элементов

    Returns:
        None если индекс допустим, иначе OutOfRangeError

    Raises:
        TypeError: Если index не целочисленный

    Examples:
        >>> check_index(2, [1, 2, 3]) is None
        True
        >>> str(check_index(0, []))
        'out-of-range (expected 0 <= actual < 0, but actual=0)'
    """
    position = operator.index(index)
    length = len(sequence)

    if length == 0:
        return OutOfRangeError(EMPTY_SEQUENCE_MSG.format(actual=position))

    return check_in_range(position, 0, length - 1)


def require_in_range(actual: T, min_value: T, max_value: T) -> None:
    """
    Как check_in_range, но бросает OutOfRangeError вместо возврата.

    Raises:
        OutOfRangeError: Если значение вне диапазона
        RangeContractViolation: Если граница NaN или max_value < min_value
    """
    err = check_in_range(actual, min_value, max_value)
    if err is not None:
        raise err


def require_index(index: Any, sequence: Sized) -> None:
    """
    Как check_index, но бросает OutOfRangeError вместо возврата.

    Raises:
        OutOfRangeError: Если индекс недопустим
    """
    err = check_index(index, sequence)
    if err is not None:
        raise err
