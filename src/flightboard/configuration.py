# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from flightboard.model.scale import ScaleFormat

APP_NAME = "flightboard"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_FLIGHTS_PATH: Path = DATA_PATH / "flights.yaml"
DATA_WORK_PACKAGES_PATH: Path = DATA_PATH / "work_packages.yaml"


class TaskTypeConfig(TypedDict):
    type_index: int
    bar_color: str
    icon: NotRequired[Optional[str]]
    caption: NotRequired[Optional[str]]


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    unit_width: int
    glyph_width: float
    scale_formats: list[ScaleFormat]
    task_types: list[TaskTypeConfig]
    log_level: NotRequired[str]


DEFAULT_SCALE_FORMATS: list[ScaleFormat] = [
    {"unit": "day", "format": "ddd DD MMM"},
    {"unit": "hour-3", "format": "HH"},
]

DEFAULT_TASK_TYPES: list[TaskTypeConfig] = [
    {"type_index": 0, "bar_color": "grey50", "icon": "○", "caption": "Scheduled"},
    {"type_index": 1, "bar_color": "dark_orange", "icon": "◐", "caption": "Estimated"},
    {"type_index": 2, "bar_color": "green", "icon": "●", "caption": "Actual"},
    {"type_index": 3, "bar_color": "medium_purple", "icon": "⚙", "caption": "Work package"},
]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "unit_width": 4,
        "glyph_width": 1.0,
        "scale_formats": [
            {"unit": scale_format["unit"], "format": scale_format["format"]}
            for scale_format in DEFAULT_SCALE_FORMATS
        ],
        "task_types": [dict(task_type) for task_type in DEFAULT_TASK_TYPES],  # type: ignore[misc]
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the flight
    repository loads its data.
    """
    global DATA_PATH, DATA_FLIGHTS_PATH, DATA_WORK_PACKAGES_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_FLIGHTS_PATH = DATA_PATH / "flights.yaml"
        DATA_WORK_PACKAGES_PATH = DATA_PATH / "work_packages.yaml"
