# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from planned_time import configuration
from planned_time.error import InvalidConfigError


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
        config = configuration.get_configuration_template()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = config
            return

        try:
            stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except YAMLError as e:
            raise InvalidConfigError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not valid YAML: {e}"
            )
        if stored is None:
            self._config = config
            return
        if not isinstance(stored, dict):
            raise InvalidConfigError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not a mapping"
            )

        # Keys missing from older files keep their template defaults
        for key in config:
            if key in stored:
                config[key] = stored[key]  # type: ignore[literal-required]
        self._config = config

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_jira_base_url(self) -> str:
        return self.config["jiraBaseUrl"] or configuration.DEFAULT_JIRA_BASE_URL

    def update_config(
        self,
        account_id: Optional[str] = None,
        token: Optional[str] = None,
        jira_base_url: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if account_id is not None:
            self.config["accountId"] = account_id
        if token is not None:
            self.config["token"] = token
        if jira_base_url is not None:
            if not jira_base_url.endswith("/"):
                jira_base_url = f"{jira_base_url}/"
            self.config["jiraBaseUrl"] = jira_base_url


CONFIGURATION_REPO = ConfigurationRepository()
