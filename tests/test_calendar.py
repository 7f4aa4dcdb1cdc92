import tempfile
import unittest
from pathlib import Path

import pendulum

from weekgrid.service.calendar import WeekCalendar
from weekgrid.service.feed import load_calendar

CURRENT_DAY = pendulum.datetime(2015, 10, 28, 12, 0, tz="UTC")
MONDAY = pendulum.datetime(2015, 10, 26, tz="UTC")


class TestWeekCalendar(unittest.TestCase):
    def setUp(self) -> None:
        self.calendar = WeekCalendar()
        self.calendar.update(
            [
                {"title": "a", "start": MONDAY.add(hours=8), "end": MONDAY.add(hours=10)},
                {"title": "b", "start": MONDAY.add(hours=9), "end": MONDAY.add(hours=11)},
                {
                    "title": "c",
                    "start": MONDAY.add(days=2, hours=9),
                    "end": MONDAY.add(days=2, hours=10),
                },
            ],
            CURRENT_DAY,
        )

    def test_layout_is_unavailable_before_update(self) -> None:
        with self.assertRaises(ValueError):
            WeekCalendar().events

    def test_current_week_day(self) -> None:
        self.assertEqual(self.calendar.current_week_day, 3)

    def test_number_of_bins_by_week_day(self) -> None:
        self.assertEqual(self.calendar.get_number_of_bins_by_week_day(1), 2)
        self.assertEqual(self.calendar.get_number_of_bins_by_week_day(2), 0)
        self.assertEqual(self.calendar.get_number_of_bins_by_week_day(3), 1)

    def test_day_headers(self) -> None:
        headers = self.calendar.get_day_headers()

        self.assertEqual(len(headers), 7)
        self.assertEqual(headers[0], "Mon 26 Oct")
        self.assertEqual(headers[6], "Sun 1 Nov")

    def test_events_by_week_day(self) -> None:
        self.assertEqual(
            [event["title"] for event in self.calendar.get_events_by_week_day(1)],
            ["a", "b"],
        )
        self.assertEqual(self.calendar.get_events_by_week_day(2), [])

    def test_update_replaces_the_previous_layout(self) -> None:
        self.calendar.update([], CURRENT_DAY.add(weeks=1))

        self.assertEqual(self.calendar.events, [])
        self.assertEqual(self.calendar.week["start"], MONDAY.add(weeks=1))


class TestLoadCalendar(unittest.TestCase):
    def _write_feed(self, directory: str, name: str, day_in_week: int, items: str) -> str:
        path = Path(directory) / name
        path.write_text(
            f"<feed><dayinweek>{day_in_week}</dayinweek>{items}</feed>", encoding="utf-8"
        )
        return str(path)

    def test_events_of_all_feeds_are_laid_out_together(self) -> None:
        monday_8am = int(MONDAY.add(hours=8).timestamp())
        monday_9am = int(MONDAY.add(hours=9).timestamp())
        item = "<item><title>{}</title><start>{}</start><end>{}</end></item>"

        with tempfile.TemporaryDirectory() as directory:
            first = self._write_feed(
                directory,
                "first.xml",
                int(CURRENT_DAY.timestamp()),
                item.format("first", monday_8am, monday_9am),
            )
            second = self._write_feed(
                directory,
                "second.xml",
                int(CURRENT_DAY.add(weeks=5).timestamp()),
                item.format("second", monday_8am, monday_9am),
            )
            calendar = load_calendar([first, second], today=CURRENT_DAY)

        self.assertEqual(len(calendar.events), 2)
        self.assertEqual(calendar.get_number_of_bins_by_week_day(1), 2)

    def test_week_comes_from_the_first_feed(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = self._write_feed(
                directory, "week.xml", int(CURRENT_DAY.timestamp()), ""
            )
            calendar = load_calendar([path])

        self.assertEqual(calendar.week["start"].date(), MONDAY.date())

    def test_explicit_day_wins_over_the_feed(self) -> None:
        today = pendulum.datetime(2016, 1, 6, tz="UTC")
        with tempfile.TemporaryDirectory() as directory:
            path = self._write_feed(
                directory, "week.xml", int(CURRENT_DAY.timestamp()), ""
            )
            calendar = load_calendar([path], today=today)

        self.assertEqual(calendar.week["start"], pendulum.datetime(2016, 1, 4, tz="UTC"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
