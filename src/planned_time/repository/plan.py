# SPDX-License-Identifier: MIT

from typing import Any, cast

import requests

from planned_time import configuration
from planned_time.error import UpstreamFetchError
from planned_time.model.date_interval import DateInterval
from planned_time.model.plan import PlanRecord
from planned_time.time import date_to_str


class PlanRepository:
    def __init__(self, account_id: str, token: str) -> None:
        self.account_id = account_id
        self.token = token

    def get_plans(self, query: DateInterval) -> list[PlanRecord]:
        """
        Fetch the plan records of the configured user for a date interval.

        Raises:
            UpstreamFetchError: If the request fails, the response status is
                not 2xx or the body is not a JSON object with a results array
        """
        url = f"{configuration.TEMPO_API_URL}/plans/user/{self.account_id}"
        try:
            response = requests.get(
                url,
                params={"from": date_to_str(query.start), "to": date_to_str(query.end)},
                headers={"Authorization": f"bearer {self.token}"},
                timeout=configuration.REQUEST_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
            body: Any = response.json()
        except requests.RequestException as e:
            raise UpstreamFetchError(str(e))
        except ValueError as e:
            raise UpstreamFetchError(f"Invalid JSON in Tempo response: {e}")

        if not isinstance(body, dict) or not isinstance(body.get("results"), list):
            raise UpstreamFetchError("Tempo response does not contain a results array")

        return cast(list[PlanRecord], body["results"])
