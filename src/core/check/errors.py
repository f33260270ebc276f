"""
Check Errors — двухуровневая таксономия ошибок проверки диапазонов

Уровни:
- OutOfRangeError: значение вне допустимых границ (recoverable).
  Возвращается из check_* функций, вызывающая сторона ветвится по виду ошибки.
- RangeContractViolation: некорректно заданный диапазон (NaN граница, max < min).
  Это ошибка программиста, а не входных данных; не предназначена для перехвата
  в обычном control flow.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Классификация OutOfRangeError только по виду, текст сообщения игнорируется
2. Проверка вида поверхностная: __cause__ / __context__ не разворачиваются
3. None никогда не совпадает ни с каким видом ошибки
4. RangeContractViolation не наследует ValueError / AssertionError
"""

from typing import Final

# =============================================================================
# СООБЩЕНИЯ НАРУШЕНИЯ КОНТРАКТА
# =============================================================================

CONTRACT_NAN_BOUNDARY_MSG: Final[str] = "check: range boundary is NaN"
CONTRACT_MAX_LESS_THAN_MIN_MSG: Final[str] = "check: max < min"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OutOfRangeError(ValueError):
    """
    Значение вне ожидаемого диапазона.

    Несёт только человекочитаемое сообщение, структурированных полей нет.
    Два экземпляра с разными сообщениями считаются ошибками одного вида.

    Сообщение хранится только в args[0]; message и __str__ производны от него.
    Неизменяемость по соглашению: args, как у любого исключения, не заморожен.

    Examples:
        >>> OutOfRangeError("a").matches(OutOfRangeError("b"))
        True
        >>> OutOfRangeError("a").matches(ValueError("a"))
        False
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""

    def __str__(self) -> str:
        return self.message

    def matches(self, other: BaseException | None) -> bool:
        """
        Поверхностная проверка вида ошибки.

        Args:
            other: Сравниваемая ошибка (или None)

        Returns:
            True если other является OutOfRangeError, иначе False
        """
        return isinstance(other, OutOfRangeError)


class RangeContractViolation(RuntimeError):
    """
    Нарушение контракта диапазона: граница NaN или max < min.

    Сигнализирует о баге вызывающего кода. Намеренно не является ValueError,
    чтобы обработчики ошибок валидации (и pydantic) его не поглощали.
    """
    pass


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_out_of_range(err: BaseException | None) -> bool:
    """
    Является ли err ошибкой вида OutOfRangeError.

    Цепочки исключений не разворачиваются: ValueError, вызванный из
    OutOfRangeError, не считается OutOfRangeError.

    Args:
        err: Проверяемая ошибка (или None)

    Returns:
        True если err является OutOfRangeError
    """
    return isinstance(err, OutOfRangeError)
