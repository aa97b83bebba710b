# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import platformdirs

APP_NAME = "tempo-planned-time"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

TEMPO_API_URL = "https://api.tempo.io/core/3"
DEFAULT_JIRA_BASE_URL = "https://sitecrafting.atlassian.net/"

# Inclusive number of days a single query may span
MAX_RANGE_DAYS = 14

REQUEST_TIMEOUT_SECONDS = 30


class Configuration(TypedDict):
    accountId: Optional[str]
    token: Optional[str]
    jiraBaseUrl: Optional[str]


def get_configuration_template() -> Configuration:
    return {
        "accountId": None,
        "token": None,
        "jiraBaseUrl": None,
    }
