# SPDX-License-Identifier: MIT

from pathlib import Path

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from daybound import configuration
from daybound.debug_log import configure_logging
from daybound.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    log_path = Path(config["log_path"]) if config["log_path"] is not None else None
    configure_logging(config["log_level"], log_path)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
