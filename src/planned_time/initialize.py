# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from planned_time import configuration


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
