"""
Numeric — Generic Numeric Helpers

Модуль содержит хелперы, применимые к любому числовому типу
(int, float, Fraction, Decimal, complex там, где это имеет смысл):
- Быстрое возведение в степень (repeated squaring)
- Предикаты знака с опциональным допуском
- Конверсии bool <-> число <-> строка
- Повторение действия N раз

ИНВАРИАНТЫ:
1. raised(b, n) для n > 0 равен b * b * ... * b (n раз)
2. raised(b, n) для n <= 0 возвращает единицу типа b
3. Все функции чистые и детерминированные
"""

from typing import Any, Callable, Final, TypeVar

N = TypeVar("N")

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допуск по умолчанию для предикатов знака: точное сравнение с нулём
SIGN_EPS_DEFAULT: Final[float] = 0.0


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def raised(value: N, exponent: int) -> N:
    """
    Возведение в целую степень методом повторного возведения в квадрат.

    Работает для любого типа с операцией `*` и конструктором от 1
    (int, float, Fraction, Decimal, complex).

    Args:
        value: Основание
        exponent: Показатель степени (int)

    Returns:
        value ** exponent для exponent > 0, иначе единица типа value

    Examples:
        >>> raised(-11, 3)
        -1331
        >>> raised(2.5, 2)
        6.25
        >>> raised(7, 0)
        1
    """
    one = type(value)(1)
    if exponent <= 0:
        return one

    result = one
    base = value
    while exponent > 0:
        if exponent & 1:
            result = result * base
        exponent >>= 1
        # Последний квадрат не нужен: экономим умножение на больших основаниях
        if exponent:
            base = base * base

    return result


# =============================================================================
# ПРЕДИКАТЫ ЗНАКА
# =============================================================================


def is_positive(value: float, eps: float = SIGN_EPS_DEFAULT) -> bool:
    """
    Проверка, что значение строго больше нуля (с учётом допуска).

    Args:
        value: Проверяемое значение
        eps: Допуск (value должно быть > eps)

    Examples:
        >>> is_positive(21.43)
        True
        >>> is_positive(1e-9, eps=1e-6)
        False
    """
    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")
    return value > eps


def is_negative(value: float, eps: float = SIGN_EPS_DEFAULT) -> bool:
    """
    Проверка, что значение строго меньше нуля (с учётом допуска).

    Args:
        value: Проверяемое значение
        eps: Допуск (value должно быть < -eps)
    """
    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")
    return value < -eps


def is_zero(value: float, eps: float = SIGN_EPS_DEFAULT) -> bool:
    """
    Проверка, что значение равно нулю (|value| <= eps).

    Examples:
        >>> is_zero(0)
        True
        >>> is_zero(1e-13, eps=1e-12)
        True
    """
    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")
    return abs(value) <= eps


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_bool(value: Any) -> bool:
    """False для нуля (0, 0.0, Decimal(0)), иначе True."""
    return value != 0


def bool_to_int(flag: bool) -> int:
    """
    Конверсия bool -> int.

    Examples:
        >>> bool_to_int(True)
        1
    """
    return 1 if flag else 0


def toggled(flag: bool) -> bool:
    """Инвертированное значение флага."""
    return not flag


def to_string(value: Any) -> str:
    """
    Строковое представление значения без потерь.

    Examples:
        >>> to_string(-97)
        '-97'
        >>> to_string(1.5)
        '1.5'
    """
    return str(value)


# =============================================================================
# ПОВТОРЕНИЕ
# =============================================================================


def times(count: int, body: Callable[[int], Any]) -> None:
    """
    Вызов body(i) для i в [0, count).

    При count <= 0 body не вызывается.

    Examples:
        >>> seen = []
        >>> times(3, seen.append)
        >>> seen
        [0, 1, 2]
    """
    if count <= 0:
        return
    for n in range(int(count)):
        body(n)


def repeat(count: int, body: Callable[[], Any]) -> None:
    """Вызов body() count раз (без индекса итерации)."""
    if count <= 0:
        return
    for _ in range(int(count)):
        body()
