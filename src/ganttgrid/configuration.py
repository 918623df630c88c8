# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "ganttgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    left_column_width: int
    hours_per_day: float
    padding_days: int
    fallback_days: int
    min_width_percent: float
    log_level: NotRequired[str]


DEFAULT_CONFIGURATION: Configuration = {
    "show_header": True,
    "data_path": None,
    "left_column_width": 40,
    "hours_per_day": 8.0,
    "padding_days": 7,
    "fallback_days": 30,
    "min_width_percent": 2.0,
    "log_level": "WARNING",
}


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_DIR

    DATA_PATH = data_path
    DATA_TASKS_DIR = DATA_PATH / "tasks"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
