"""
Тесты для модуля dates
"""

from datetime import datetime, timedelta, timezone

from modkit.core.dates import end_of_day, start_of_day, tomorrow, until_tomorrow, yesterday

MSK = timezone(timedelta(hours=3))


class TestDayHelpers:
    """Тесты хелперов календарного дня"""

    def test_yesterday_tomorrow_keep_time(self) -> None:
        moment = datetime(2024, 3, 1, 15, 30)
        assert yesterday(moment) == datetime(2024, 2, 29, 15, 30)
        assert tomorrow(moment) == datetime(2024, 3, 2, 15, 30)

    def test_start_of_day(self) -> None:
        assert start_of_day(datetime(2024, 5, 17, 23, 59, 59, 999)) == datetime(2024, 5, 17)

    def test_end_of_day(self) -> None:
        assert end_of_day(datetime(2024, 12, 31, 8, 0)) == datetime(2024, 12, 31, 23, 59, 59)
        assert end_of_day(datetime(2024, 12, 31)) == datetime(2024, 12, 31, 23, 59, 59)

    def test_timezone_is_preserved(self) -> None:
        moment = datetime(2024, 1, 1, 12, 0, tzinfo=MSK)
        assert start_of_day(moment).tzinfo is MSK
        assert end_of_day(moment) == datetime(2024, 1, 1, 23, 59, 59, tzinfo=MSK)

    def test_until_tomorrow(self) -> None:
        now = datetime(2024, 6, 10, 1, 2, 3)
        assert until_tomorrow(now) == datetime(2024, 6, 10, 23, 59, 59)

    def test_until_tomorrow_defaults_to_now(self) -> None:
        before = datetime.now()
        result = until_tomorrow()
        assert result.date() in (before.date(), (before + timedelta(days=1)).date())
        assert (result.hour, result.minute, result.second) == (23, 59, 59)
