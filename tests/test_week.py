import unittest

import pendulum

from weekgrid.layout.week import get_days, resolve_week
from weekgrid.time import get_week_day

MONDAY = pendulum.datetime(2015, 10, 26, tz="UTC")


class TestWeekResolution(unittest.TestCase):
    def test_week_starts_on_monday_midnight(self) -> None:
        week = resolve_week(MONDAY.add(days=2, hours=15, minutes=20))

        self.assertEqual(week["start"], MONDAY)
        self.assertEqual(week["current_week_day"], 3)

    def test_week_ends_one_millisecond_before_next_monday(self) -> None:
        week = resolve_week(MONDAY.add(days=2))

        self.assertEqual(week["end"], pendulum.datetime(2015, 11, 1, 23, 59, 59, 999000, tz="UTC"))

    def test_sunday_is_the_last_day_of_the_week(self) -> None:
        sunday = pendulum.datetime(2015, 11, 1, 22, 0, tz="UTC")
        week = resolve_week(sunday)

        self.assertEqual(get_week_day(sunday), 7)
        self.assertEqual(week["start"], MONDAY)
        self.assertEqual(week["current_week_day"], 7)

    def test_monday_midnight_belongs_to_its_own_week(self) -> None:
        self.assertEqual(resolve_week(MONDAY)["start"], MONDAY)
        self.assertEqual(
            resolve_week(MONDAY.subtract(microseconds=1000))["start"],
            MONDAY.subtract(days=7),
        )

    def test_week_follows_the_timezone_of_the_current_day(self) -> None:
        current_day = pendulum.datetime(2015, 10, 26, 1, 0, tz="Europe/Moscow")
        week = resolve_week(current_day)

        self.assertEqual(week["start"], pendulum.datetime(2015, 10, 26, tz="Europe/Moscow"))


class TestDays(unittest.TestCase):
    def test_seven_days_are_allocated_upfront(self) -> None:
        days = get_days(resolve_week(MONDAY.add(days=3)))

        self.assertEqual(len(days), 7)
        self.assertEqual([day["week_day"] for day in days], [1, 2, 3, 4, 5, 6, 7])
        for day in days:
            self.assertEqual(day["bins"], [])
            self.assertEqual(day["events"], [])

    def test_day_bounds(self) -> None:
        days = get_days(resolve_week(MONDAY))

        self.assertEqual(days[1]["start"], MONDAY.add(days=1))
        self.assertEqual(days[1]["end"], MONDAY.add(days=2).subtract(microseconds=1000))
        self.assertEqual(days[6]["start"], MONDAY.add(days=6))


if __name__ == "__main__":
    unittest.main(verbosity=2)
