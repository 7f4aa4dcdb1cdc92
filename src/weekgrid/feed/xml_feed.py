# SPDX-License-Identifier: MIT

import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import Optional

import pendulum
import requests

from weekgrid.feed.error import FeedError
from weekgrid.logger import get_logger
from weekgrid.model.event import RawEvent
from weekgrid.model.feed import Feed
from weekgrid.time import datetime_from_unix_timestamp

logger = get_logger(__name__)

REQUEST_TIMEOUT_SECONDS = 10


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _get_text(element: ElementTree.Element, tag: str) -> Optional[str]:
    child = element.find(f".//{tag}")
    if child is None or child.text is None:
        return None
    return child.text.strip()


def _get_timestamp(
    element: ElementTree.Element, tag: str, tz: str
) -> pendulum.DateTime:
    text = _get_text(element, tag)
    if text is None:
        raise FeedError(f"<{element.tag}> has no <{tag}> timestamp")
    try:
        timestamp = int(text)
    except ValueError:
        raise FeedError(f"<{tag}> is not a Unix timestamp: {text!r}")
    return datetime_from_unix_timestamp(timestamp, tz=tz)


def parse_item(item: ElementTree.Element, tz: str = "local") -> RawEvent:
    start = _get_timestamp(item, "start", tz)
    end = _get_timestamp(item, "end", tz)
    if end < start:
        raise FeedError(f"event ends before it starts: {start} > {end}")
    return {
        "title": _get_text(item, "title") or "",
        "start": start,
        "end": end,
    }


def parse_feed(text: str, tz: str = "local") -> Feed:
    """
    Parse an XML event feed.

    The feed carries the current moment in `<dayinweek>` and one `<item>`
    per event, each with `<title>`, `<start>` and `<end>`. All timestamps
    are Unix seconds.

    Args:
        text: XML document
        tz: Timezone the instants are expressed in

    Returns:
        The current day and the raw events, in feed order
    """
    try:
        root = ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        raise FeedError(f"invalid XML: {e}")

    current_day = _get_timestamp(root, "dayinweek", tz)
    events = [parse_item(item, tz) for item in root.iter("item")]
    return {"current_day": current_day, "events": events}


def read_feed(source: str, tz: str = "local") -> Feed:
    """Read and parse a feed from a file path or an http(s) URL."""
    logger.info("reading feed %s", source)
    if is_url(source):
        try:
            response = requests.get(source, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FeedError(f"cannot fetch {source}: {e}")
        return parse_feed(response.text, tz)

    path = Path(source).expanduser()
    if not path.is_file():
        raise FeedError(f"feed file not found: {source}")
    return parse_feed(path.read_text(encoding="utf-8"), tz)
