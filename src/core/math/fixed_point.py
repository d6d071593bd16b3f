"""
FixedPoint — Безопасная целочисленная арифметика uint256

Модуль обеспечивает детерминированную арифметику для FixedPoint18:
- Проверка типа (только int, bool запрещён)
- Overflow/underflow отвергаются, а не "заворачиваются"
- mul_div с полной точностью промежуточного произведения (как mulDiv)
- Clamp и валидация диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [0, MAX_UINT256]
2. Никаких float: все операции выполняются в int
3. Округление всегда floor (деление //), если явно не указано иное
4. Деление на ноль никогда не происходит молча (raise)
"""

from typing import Optional

from src.core.errors import ArithmeticOverflow, InvalidInput
from src.core.math.constants import MAX_UINT256

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_uint(value: int, name: str) -> int:
    """
    Валидация uint256 значения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int
        ArithmeticOverflow: Если value < 0 или > MAX_UINT256
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ArithmeticOverflow(f"{name} must be non-negative, got {value}")
    if value > MAX_UINT256:
        raise ArithmeticOverflow(f"{name} exceeds uint256 range")
    return value


def validate_positive(value: int, name: str) -> int:
    """
    Валидация, что uint256 значение строго положительное.

    Raises:
        InvalidInput: Если value == 0
    """
    validate_uint(value, name)
    if value == 0:
        raise InvalidInput(f"{name} must be positive, got 0")
    return value


def validate_bps(value: int, name: str, max_bps: int) -> int:
    """
    Валидация basis points в диапазоне [0, max_bps].

    Raises:
        InvalidInput: Если value > max_bps
    """
    validate_uint(value, name)
    if value > max_bps:
        raise InvalidInput(f"{name} must be <= {max_bps} bps, got {value}")
    return value


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """Сложение с проверкой overflow."""
    result = a + b
    if result > MAX_UINT256:
        raise ArithmeticOverflow(f"addition overflow: {a} + {b}")
    return result


def checked_sub(a: int, b: int) -> int:
    """Вычитание с проверкой underflow (FixedPoint18 не бывает отрицательным)."""
    if b > a:
        raise ArithmeticOverflow(f"subtraction underflow: {a} - {b}")
    return a - b


def saturating_sub(a: int, b: int) -> int:
    """max(a - b, 0)."""
    return a - b if a > b else 0


def checked_mul(a: int, b: int) -> int:
    """Умножение с проверкой overflow."""
    result = a * b
    if result > MAX_UINT256:
        raise ArithmeticOverflow("multiplication overflow")
    return result


def mul_div(a: int, b: int, denominator: int) -> int:
    """
    floor(a * b / denominator) с полной точностью промежуточного произведения.

    Промежуточное произведение не ограничено 256 битами (семантика mulDiv),
    ограничен только результат.

    Args:
        a: Первый множитель (uint256)
        b: Второй множитель (uint256)
        denominator: Делитель (> 0)

    Returns:
        floor(a * b / denominator)

    Raises:
        ZeroDivisionError: Если denominator == 0 (вызывающий код обязан
            проверить знаменатель и поднять доменную ошибку заранее)
        ArithmeticOverflow: Если результат не помещается в uint256

    Examples:
        >>> mul_div(10**18, 50_000 * 10**18, 10**18)
        50000000000000000000000
    """
    if denominator == 0:
        raise ZeroDivisionError("mul_div denominator is zero")
    result = (a * b) // denominator
    if result > MAX_UINT256 or result < 0:
        raise ArithmeticOverflow("mul_div result exceeds uint256 range")
    return result


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: int,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
