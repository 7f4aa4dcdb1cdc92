# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekgrid import configuration

VALID_GRANULARITIES = (15, 30, 60)
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
MIN_DAY_WIDTH = 12


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}

        # Migration: fill in settings added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        self._config = cast(configuration.Configuration, loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        feed_paths: Optional[list[str]] = None,
        ics_paths: Optional[list[str]] = None,
        day_width: Optional[int] = None,
        granularity: Optional[int] = None,
        start_hour: Optional[int] = None,
        end_hour: Optional[int] = None,
        log_level: Optional[str] = None,
        remove_feed_paths: bool = False,
        remove_ics_paths: bool = False,
    ) -> None:
        if granularity is not None and granularity not in VALID_GRANULARITIES:
            raise ValueError(
                f"granularity must be one of {VALID_GRANULARITIES}, got {granularity}"
            )
        if day_width is not None and day_width < MIN_DAY_WIDTH:
            raise ValueError(f"day width must be at least {MIN_DAY_WIDTH}, got {day_width}")
        if log_level is not None and log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {VALID_LOG_LEVELS}, got {log_level}"
            )
        hours = [
            start_hour if start_hour is not None else self.config["start_hour"],
            end_hour if end_hour is not None else self.config["end_hour"],
        ]
        if not 0 <= hours[0] < hours[1] <= 24:
            raise ValueError(
                f"hour range must satisfy 0 <= start < end <= 24, got {hours[0]}-{hours[1]}"
            )

        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if feed_paths is not None:
            self.config["feed_paths"] = list(dict.fromkeys(feed_paths))
        if ics_paths is not None:
            self.config["ics_paths"] = list(dict.fromkeys(ics_paths))
        if day_width is not None:
            self.config["day_width"] = day_width
        if granularity is not None:
            self.config["granularity"] = granularity
        if start_hour is not None:
            self.config["start_hour"] = start_hour
        if end_hour is not None:
            self.config["end_hour"] = end_hour
        if log_level is not None:
            self.config["log_level"] = log_level.upper()

        if remove_feed_paths:
            self.config["feed_paths"] = None
        if remove_ics_paths:
            self.config["ics_paths"] = None


CONFIGURATION_REPO = ConfigurationRepository()
