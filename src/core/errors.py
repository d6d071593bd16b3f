"""
Errors — Таксономия ошибок финансового ядра

Каждая ошибка соответствует ровно одному виду отказа. Ядро не делает
retry/fallback и не возвращает частичных результатов: вызывающая сторона
обязана откатить всю операцию целиком.

Все ошибки наследуются от ValueError.
"""


class CoreMathError(ValueError):
    """Базовая ошибка ядра."""

    pass


# =============================================================================
# ВХОДНЫЕ ДАННЫЕ
# =============================================================================


class InvalidInput(CoreMathError):
    """Нулевая сумма/цена там, где требуется строго положительное значение."""

    pass


class BelowMinimumValue(CoreMathError):
    """Вычисленная USD стоимость ниже dust floor."""

    pass


class ValueTooSmall(BelowMinimumValue):
    """USD стоимость одной из сторон CR ниже минимального порога."""

    pass


class UnsupportedAsset(CoreMathError):
    """Неизвестный токен (нет в статическом whitelist decimal-классов)."""

    pass


class ArithmeticOverflow(CoreMathError):
    """
    Выход за пределы uint256 (overflow) или отрицательный результат (underflow).

    FixedPoint18 никогда не бывает отрицательным и не переполняется молча.
    """

    pass


# =============================================================================
# ЗАЩИТА ОТ ДЕЛЕНИЯ НА НОЛЬ
# =============================================================================


class ZeroReserve(CoreMathError):
    """Нулевой резерв базового токена в пуле."""

    pass


class ZeroPrice(CoreMathError):
    """Нулевая цена в знаменателе."""

    pass


# =============================================================================
# ВАЛИДАЦИЯ ФИДОВ
# =============================================================================


class StaleData(CoreMathError):
    """Данные фида старше допустимого staleness budget."""

    pass


class IncompleteRoundData(CoreMathError):
    """Раунд фида не завершён (updated_at == 0)."""

    pass


class RoundRegression(CoreMathError):
    """answered_in_round < round_id: ответ получен в более раннем раунде."""

    pass


class ObservationWindowTooShort(CoreMathError):
    """Окно наблюдений TWAP короче минимального периода."""

    pass


# =============================================================================
# ЦЕНЫ И КОМПЕНСАЦИЯ
# =============================================================================


class ExcessiveDeviation(CoreMathError):
    """Цена отклоняется от медианы/референса больше допустимого bps."""

    pass


class InsufficientSecondaryPriceData(CoreMathError):
    """Waterfall требует цену компенсационного актива, но она не передана."""

    pass


class InvalidSecondaryPrice(CoreMathError):
    """Требуемая цена компенсационного актива равна нулю."""

    pass


class InsufficientSurplus(CoreMathError):
    """Нет избытка обеспечения для погашения bond-токенов."""

    pass
