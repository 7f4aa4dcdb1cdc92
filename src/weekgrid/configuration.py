# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import platformdirs

APP_NAME = "weekgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    show_header: bool
    feed_paths: Optional[list[str]]
    ics_paths: Optional[list[str]]
    day_width: int
    granularity: int
    start_hour: int
    end_hour: int
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "feed_paths": None,
        "ics_paths": None,
        "day_width": 24,
        "granularity": 30,
        "start_hour": 8,
        "end_hour": 20,
        "log_level": "WARNING",
    }
