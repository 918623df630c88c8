# SPDX-License-Identifier: MIT

import logging

from yaml import safe_load

from ganttgrid import configuration
from ganttgrid.cleanup import flush
from ganttgrid.repository.configuration import ConfigurationRepository


def test_initialize_writes_default_config(app_paths):
    written = safe_load(configuration.APP_CONFIG_PATH.read_text())

    assert written == configuration.DEFAULT_CONFIGURATION
    assert configuration.DATA_TASKS_DIR.is_dir()


def test_missing_keys_are_filled_from_defaults(app_paths):
    configuration.APP_CONFIG_PATH.write_text("show_header: false\n")

    config = ConfigurationRepository().get_config()

    assert config["show_header"] is False
    assert config["padding_days"] == 7
    assert config["left_column_width"] == 40


def test_update_is_written_on_flush(app_paths):
    repository = ConfigurationRepository()
    repository.update_config(padding_days=2, min_width_percent=5.0)

    assert safe_load(configuration.APP_CONFIG_PATH.read_text())["padding_days"] == 7

    repository.flush()

    written = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert written["padding_days"] == 2
    assert written["min_width_percent"] == 5.0
    assert repository.is_dirty is False


def test_remove_data_path(app_paths):
    repository = ConfigurationRepository()
    repository.update_config(data_path="/tmp/elsewhere")
    repository.update_config(remove_data_path=True)

    assert repository.get_config()["data_path"] is None


def test_cleanup_flush_persists_repositories(app_paths):
    from ganttgrid.repository.configuration import CONFIGURATION_REPO

    CONFIGURATION_REPO.update_config(fallback_days=14)
    flush()

    assert safe_load(configuration.APP_CONFIG_PATH.read_text())["fallback_days"] == 14


def test_invalid_hand_edited_settings_fall_back_to_defaults(app_paths, caplog):
    configuration.APP_CONFIG_PATH.write_text(
        "show_header: true\n"
        "hours_per_day: 0\n"
        "padding_days: -3\n"
        "fallback_days: many\n"
        "min_width_percent: 250\n"
        "left_column_width: 30\n"
    )

    with caplog.at_level(logging.WARNING, logger="ganttgrid"):
        config = ConfigurationRepository().get_config()

    assert config["hours_per_day"] == 8.0
    assert config["padding_days"] == 7
    assert config["fallback_days"] == 30
    assert config["min_width_percent"] == 2.0
    assert config["left_column_width"] == 30
    assert len(caplog.records) == 4
