import tempfile
import unittest
from pathlib import Path
from unittest import mock

import pendulum
import requests

from weekgrid.feed.error import FeedError
from weekgrid.feed.xml_feed import is_url, parse_feed, read_feed

# Wednesday 2015-10-28 12:00 UTC
DAY_IN_WEEK = 1446033600
# Monday 2015-10-26 08:00 and 09:00 UTC
MONDAY_8AM = 1445846400
MONDAY_9AM = 1445850000

FEED = f"""<?xml version="1.0" encoding="UTF-8"?>
<feed>
  <dayinweek>{DAY_IN_WEEK}</dayinweek>
  <item>
    <title>Standup</title>
    <start>{MONDAY_8AM}</start>
    <end>{MONDAY_9AM}</end>
  </item>
  <item>
    <title> Review </title>
    <start>{MONDAY_9AM}</start>
    <end>{MONDAY_9AM}</end>
  </item>
</feed>
"""


def _feed_with_item(item: str) -> str:
    return f"<feed><dayinweek>{DAY_IN_WEEK}</dayinweek><item>{item}</item></feed>"


class TestParseFeed(unittest.TestCase):
    def test_current_day_and_events_are_read(self) -> None:
        feed = parse_feed(FEED, tz="UTC")

        self.assertEqual(feed["current_day"], pendulum.datetime(2015, 10, 28, 12, tz="UTC"))
        self.assertEqual(len(feed["events"]), 2)
        standup = feed["events"][0]
        self.assertEqual(standup["title"], "Standup")
        self.assertEqual(standup["start"], pendulum.datetime(2015, 10, 26, 8, tz="UTC"))
        self.assertEqual(standup["end"], pendulum.datetime(2015, 10, 26, 9, tz="UTC"))

    def test_titles_are_stripped(self) -> None:
        feed = parse_feed(FEED, tz="UTC")
        self.assertEqual(feed["events"][1]["title"], "Review")

    def test_missing_title_reads_as_empty(self) -> None:
        feed = parse_feed(
            _feed_with_item(f"<start>{MONDAY_8AM}</start><end>{MONDAY_9AM}</end>"),
            tz="UTC",
        )
        self.assertEqual(feed["events"][0]["title"], "")

    def test_feed_without_items(self) -> None:
        feed = parse_feed(f"<feed><dayinweek>{DAY_IN_WEEK}</dayinweek></feed>", tz="UTC")
        self.assertEqual(feed["events"], [])

    def test_invalid_xml(self) -> None:
        with self.assertRaises(FeedError):
            parse_feed("<feed><item>", tz="UTC")

    def test_missing_current_day(self) -> None:
        with self.assertRaises(FeedError):
            parse_feed("<feed></feed>", tz="UTC")

    def test_missing_start(self) -> None:
        with self.assertRaises(FeedError):
            parse_feed(_feed_with_item(f"<title>a</title><end>{MONDAY_9AM}</end>"), tz="UTC")

    def test_timestamp_must_be_an_integer(self) -> None:
        with self.assertRaises(FeedError):
            parse_feed(
                _feed_with_item(f"<start>monday</start><end>{MONDAY_9AM}</end>"),
                tz="UTC",
            )

    def test_event_ending_before_its_start(self) -> None:
        with self.assertRaises(FeedError):
            parse_feed(
                _feed_with_item(f"<start>{MONDAY_9AM}</start><end>{MONDAY_8AM}</end>"),
                tz="UTC",
            )

    def test_feed_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(FeedError, ValueError))


class TestReadFeed(unittest.TestCase):
    def test_read_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as directory:
            path = Path(directory) / "week.xml"
            path.write_text(FEED, encoding="utf-8")

            feed = read_feed(str(path), tz="UTC")

        self.assertEqual([event["title"] for event in feed["events"]], ["Standup", "Review"])

    def test_missing_file(self) -> None:
        with self.assertRaises(FeedError):
            read_feed("/nonexistent/weekgrid/week.xml", tz="UTC")

    def test_read_from_url(self) -> None:
        response = mock.Mock(text=FEED)
        with mock.patch("weekgrid.feed.xml_feed.requests.get", return_value=response) as get:
            feed = read_feed("https://example.com/week.xml", tz="UTC")

        get.assert_called_once_with("https://example.com/week.xml", timeout=10)
        response.raise_for_status.assert_called_once_with()
        self.assertEqual(len(feed["events"]), 2)

    def test_unreachable_url(self) -> None:
        with mock.patch(
            "weekgrid.feed.xml_feed.requests.get",
            side_effect=requests.ConnectionError("refused"),
        ):
            with self.assertRaises(FeedError):
                read_feed("http://localhost:1/week.xml", tz="UTC")

    def test_is_url(self) -> None:
        self.assertTrue(is_url("https://example.com/feed"))
        self.assertTrue(is_url("http://example.com/feed"))
        self.assertFalse(is_url("~/feeds/week.xml"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
