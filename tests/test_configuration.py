# SPDX-License-Identifier: MIT

from yaml import safe_load

from flightboard.configuration import get_default_configuration
from flightboard.repository.configuration import CONFIGURATION_REPO


def test_missing_file_gives_defaults(isolated_config):
    assert CONFIGURATION_REPO.get_config() == get_default_configuration()


def test_missing_keys_are_filled_from_defaults(isolated_config):
    isolated_config.write_text("show_header: false\nunit_width: 8\n")

    config = CONFIGURATION_REPO.get_config()

    assert config["show_header"] is False
    assert config["unit_width"] == 8
    assert config["scale_formats"] == get_default_configuration()["scale_formats"]
    assert config["log_level"] == "WARNING"


def test_update_and_flush(isolated_config):
    CONFIGURATION_REPO.update_config(
        unit_width=6,
        scale_formats=[{"unit": "day", "format": "DD"}],
        log_level="DEBUG",
    )
    CONFIGURATION_REPO.flush()

    written = safe_load(isolated_config.read_text())
    assert written["unit_width"] == 6
    assert written["scale_formats"] == [{"unit": "day", "format": "DD"}]
    assert written["log_level"] == "DEBUG"
    assert not CONFIGURATION_REPO.is_dirty


def test_remove_data_path(isolated_config):
    CONFIGURATION_REPO.update_config(data_path="/tmp/flights")
    assert CONFIGURATION_REPO.get_config()["data_path"] == "/tmp/flights"

    CONFIGURATION_REPO.update_config(remove_data_path=True)
    assert CONFIGURATION_REPO.get_config()["data_path"] is None


def test_returned_config_is_a_copy(isolated_config):
    CONFIGURATION_REPO.get_config()["unit_width"] = 99

    assert CONFIGURATION_REPO.get_config()["unit_width"] == 4
