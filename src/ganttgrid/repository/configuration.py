# SPDX-License-Identifier: MIT

import logging
import math
from copy import deepcopy
from typing import Any, Callable, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttgrid import configuration

logger = logging.getLogger(__name__)


def _is_positive_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def _is_positive_int(value: Any) -> bool:
    return _is_positive_number(value) and isinstance(value, int)


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_percent(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and 0 <= value <= 100
    )


# Hand edits to config.yaml must not reach the layout engine
LAYOUT_SETTING_CHECKS: dict[str, Callable[[Any], bool]] = {
    "left_column_width": _is_positive_int,
    "hours_per_day": _is_positive_number,
    "padding_days": _is_non_negative_int,
    "fallback_days": _is_positive_int,
    "min_width_percent": _is_percent,
}


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Fill in settings added after the config file was written
        for key, value in configuration.DEFAULT_CONFIGURATION.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

        settings = cast(dict[str, Any], self._config)
        defaults = cast(dict[str, Any], configuration.DEFAULT_CONFIGURATION)
        for key, is_valid in LAYOUT_SETTING_CHECKS.items():
            if not is_valid(settings[key]):
                logger.warning(
                    "config %s: invalid value %r, using %r",
                    key,
                    settings[key],
                    defaults[key],
                )
                settings[key] = defaults[key]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        left_column_width: Optional[int] = None,
        hours_per_day: Optional[float] = None,
        padding_days: Optional[int] = None,
        fallback_days: Optional[int] = None,
        min_width_percent: Optional[float] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if hours_per_day is not None:
            self.config["hours_per_day"] = hours_per_day
        if padding_days is not None:
            self.config["padding_days"] = padding_days
        if fallback_days is not None:
            self.config["fallback_days"] = fallback_days
        if min_width_percent is not None:
            self.config["min_width_percent"] = min_width_percent
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
