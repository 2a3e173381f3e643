"""
Dates — хелперы календарного дня

Арифметика ведётся по "настенным часам" datetime: сдвиг на день сохраняет
время суток, tzinfo входного значения сохраняется (naive остаётся naive).
"""

from datetime import datetime, timedelta
from typing import Final, Optional

ONE_DAY: Final[timedelta] = timedelta(days=1)
ONE_SECOND: Final[timedelta] = timedelta(seconds=1)


def yesterday(moment: datetime) -> datetime:
    return moment - ONE_DAY


def tomorrow(moment: datetime) -> datetime:
    """
    Examples:
        >>> tomorrow(datetime(2024, 2, 28, 15, 30))
        datetime.datetime(2024, 2, 29, 15, 30)
    """
    return moment + ONE_DAY


def start_of_day(moment: datetime) -> datetime:
    """Полночь того же календарного дня."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """
    Последняя секунда дня: начало следующего дня минус одна секунда.

    Examples:
        >>> end_of_day(datetime(2024, 12, 31, 8, 0))
        datetime.datetime(2024, 12, 31, 23, 59, 59)
    """
    return start_of_day(tomorrow(moment)) - ONE_SECOND


def until_tomorrow(now: Optional[datetime] = None) -> datetime:
    """
    Конец текущего дня.

    Args:
        now: Текущий момент (по умолчанию datetime.now())
    """
    if now is None:
        now = datetime.now()
    return end_of_day(now)
