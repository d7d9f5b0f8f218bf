# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "daybound"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH = platformdirs.user_log_path(APP_NAME)
DEFAULT_DEBUG_LOG_PATH = LOG_PATH / "debug.log"


class Configuration(TypedDict):
    ics_paths: Optional[list[str]]
    theme: str
    timezone: str
    nap_threshold_hours: float
    evening_cutoff_hour: int
    default_end_hour: int
    malformed_events: str
    log_path: Optional[str]
    log_level: str
    append_when_missing: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "ics_paths": None,
        "theme": "dark",
        "timezone": "local",
        "nap_threshold_hours": 2,
        "evening_cutoff_hour": 18,
        "default_end_hour": 5,
        "malformed_events": "skip",
        "log_path": None,
        "log_level": "INFO",
        "append_when_missing": False,
    }
