# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Callable, Optional

import pytest
import requests

from planned_time import configuration
from planned_time.repository.configuration import CONFIGURATION_REPO


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        invalid_json: bool = False,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(
                f"{self.status_code} Client Error: Unauthorized", response=self
            )

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.body


class FakeTempo:
    """Stands in for requests.get and records every call made to it."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.response: FakeResponse = FakeResponse(body={"results": []})
        self.error: Optional[Exception] = None

    def respond_with(self, results: list[dict[str, Any]]) -> None:
        self.response = FakeResponse(body={"results": results})

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config_dir / "config.yaml"


@pytest.fixture
def fake_tempo(monkeypatch: pytest.MonkeyPatch) -> FakeTempo:
    fake = FakeTempo()
    monkeypatch.setattr(requests, "get", fake)
    return fake


def make_plan(
    task: str,
    values: list[tuple[str, str, Optional[int]]],
    description: Optional[str] = "Fix bug",
    seconds_per_day: Optional[int] = None,
) -> dict[str, Any]:
    return {
        "self": f"https://api.tempo.io/core/3/plans/{task.rsplit('/', 1)[-1]}",
        "planItem": {"self": task, "type": "ISSUE"},
        "description": description,
        "secondsPerDay": seconds_per_day,
        "dates": {
            "metadata": {"count": len(values), "all": len(values)},
            "values": [
                {"from": start, "to": end, "timePlannedSeconds": seconds}
                for start, end, seconds in values
            ],
        },
    }


@pytest.fixture
def plan_factory() -> Callable[..., dict[str, Any]]:
    return make_plan
