# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import Dumper, SafeLoader  # type: ignore[assignment]

from daybound import configuration
from daybound.color import Theme
from daybound.service.boundary import BoundarySettings


class ConfigurationRepository:
    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config: Optional[configuration.Configuration] = None
        self._config_path = config_path
        self.is_dirty = False

    @property
    def config_path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if self.config_path.is_file():
            self._config = load(self.config_path.read_text(), Loader=SafeLoader)
        if self._config is None:
            self._config = configuration.get_default_configuration()
            return

        # Fill in keys added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_theme(self) -> Theme:
        return Theme(self.config["theme"])

    def get_boundary_settings(self) -> BoundarySettings:
        return {
            "nap_threshold_hours": self.config["nap_threshold_hours"],
            "evening_cutoff_hour": self.config["evening_cutoff_hour"],
            "default_end_hour": self.config["default_end_hour"],
        }

    def update_config(
        self,
        ics_paths: Optional[list[str]] = None,
        remove_ics_paths: bool = False,
        theme: Optional[str] = None,
        timezone: Optional[str] = None,
        nap_threshold_hours: Optional[float] = None,
        evening_cutoff_hour: Optional[int] = None,
        default_end_hour: Optional[int] = None,
        malformed_events: Optional[str] = None,
        log_path: Optional[str] = None,
        remove_log_path: bool = False,
        log_level: Optional[str] = None,
        append_when_missing: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if ics_paths is not None:
            self.config["ics_paths"] = ics_paths
        if remove_ics_paths:
            self.config["ics_paths"] = None
        if theme is not None:
            self.config["theme"] = Theme(theme).value
        if timezone is not None:
            self.config["timezone"] = timezone
        if nap_threshold_hours is not None:
            self.config["nap_threshold_hours"] = nap_threshold_hours
        if evening_cutoff_hour is not None:
            self.config["evening_cutoff_hour"] = evening_cutoff_hour
        if default_end_hour is not None:
            self.config["default_end_hour"] = default_end_hour
        if malformed_events is not None:
            self.config["malformed_events"] = malformed_events
        if log_path is not None:
            self.config["log_path"] = log_path
        if remove_log_path:
            self.config["log_path"] = None
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if append_when_missing is not None:
            self.config["append_when_missing"] = append_when_missing


CONFIGURATION_REPO = ConfigurationRepository()
