# SPDX-License-Identifier: MIT

import hashlib

CURRENT_DAY_COLOR = "bright_cyan"
EMPTY_SLOT_COLOR = "bright_black"

# Chosen for good visibility in terminal displays
EVENT_COLORS = [
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "dark_orange",
    "purple",
    "deep_pink1",
    "spring_green1",
    "dark_violet",
    "gold1",
    "orange1",
    "pink1",
]


def get_color_for_title(title: str) -> str:
    """Return a colour from the palette that stays the same across runs."""
    digest = hashlib.md5(title.encode("utf-8")).digest()
    return EVENT_COLORS[digest[0] % len(EVENT_COLORS)]
