# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml import safe_load

from planned_time.repository.configuration import CONFIGURATION_REPO
from planned_time.terminal.app import app

from conftest import FakeResponse, FakeTempo, make_plan

runner = CliRunner()


@pytest.fixture
def configured(config_path: Path) -> Path:
    CONFIGURATION_REPO.update_config(account_id="foo", token="bar")
    CONFIGURATION_REPO.flush()
    return config_path


def test_config_persists_options(config_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "config",
            "--account",
            "foo",
            "--token",
            "secret-token",
            "--url",
            "https://mycompany.atlassian.net",
        ],
    )

    assert result.exit_code == 0
    assert "Configuration updated successfully!" in result.output
    assert "secret-token" not in result.output
    assert safe_load(config_path.read_text()) == {
        "accountId": "foo",
        "token": "secret-token",
        "jiraBaseUrl": "https://mycompany.atlassian.net/",
    }


def test_config_without_options_shows_configuration(configured: Path) -> None:
    result = runner.invoke(app, ["c"])

    assert result.exit_code == 0
    assert "accountId" in result.output
    assert "foo" in result.output
    assert "(default)" in result.output


def test_get_without_config_is_reported(config_path: Path, fake_tempo: FakeTempo) -> None:
    result = runner.invoke(app, ["get"])

    assert result.exit_code == 1
    assert "haven't run the config command" in result.output
    assert fake_tempo.calls == []


def test_get_shows_planned_time_per_day(configured: Path, fake_tempo: FakeTempo) -> None:
    fake_tempo.respond_with(
        [
            make_plan(
                "https://api.tempo.io/core/3/issue/ABC-123",
                [("2020-01-11", "2020-01-11", 7200)],
            )
        ]
    )

    result = runner.invoke(
        app, ["get", "--from", "2020-01-10", "--to", "2020-01-12"]
    )

    assert result.exit_code == 0
    assert "Planned time for Fri, Jan 10th 2020" in result.output
    assert "Planned time for Sat, Jan 11th 2020" in result.output
    assert "Planned time for Sun, Jan 12th 2020" in result.output
    assert result.output.count("No planned time for this day!") == 2
    assert "ABC-123" in result.output
    assert "2 hours" in result.output
    assert "Fix bug" in result.output
    assert fake_tempo.calls[0]["params"] == {"from": "2020-01-10", "to": "2020-01-12"}


def test_get_accepts_long_option_names(configured: Path, fake_tempo: FakeTempo) -> None:
    result = runner.invoke(
        app, ["g", "--fromDate", "2020-01-10", "--toDate", "2020-01-10"]
    )

    assert result.exit_code == 0
    assert result.output.count("No planned time for this day!") == 1


def test_get_week_shows_seven_days(configured: Path, fake_tempo: FakeTempo) -> None:
    result = runner.invoke(app, ["--no-header", "get", "--week"])

    assert result.exit_code == 0
    assert result.output.count("No planned time for this day!") == 7
    assert "tempo-planned-time" not in result.output


@pytest.mark.parametrize(
    "args, message",
    [
        (["--tomorrow", "--week"], "Make up your mind"),
        (["--from", "2020-01-32"], "Dates must be formatted as YYYY-MM-DD"),
        (["--from", "2020-01-12", "--to", "2020-01-10"], "occurs after toDate"),
        (["--from", "2020-01-10", "--to", "2020-01-25"], "maximum of 14 days"),
    ],
)
def test_get_validation_fails_before_fetch(
    configured: Path, fake_tempo: FakeTempo, args: list[str], message: str
) -> None:
    result = runner.invoke(app, ["get", *args])

    assert result.exit_code == 1
    assert message in result.output
    assert fake_tempo.calls == []


def test_get_reports_fetch_errors(configured: Path, fake_tempo: FakeTempo) -> None:
    fake_tempo.response = FakeResponse(status_code=401)

    result = runner.invoke(app, ["get"])

    assert result.exit_code == 1
    assert "401 Client Error" in result.output
    assert len(fake_tempo.calls) == 1


def test_get_verbose_reports_corrections(configured: Path, fake_tempo: FakeTempo) -> None:
    fake_tempo.respond_with(
        [
            make_plan(
                "https://x/issue/ABC-123",
                [("2020-01-10", "2020-01-10", 0), ("2020-01-12", "2020-01-10", 3600)],
            )
        ]
    )

    quiet = runner.invoke(app, ["get", "--from", "2020-01-10", "--to", "2020-01-12"])
    verbose = runner.invoke(
        app, ["get", "--from", "2020-01-10", "--to", "2020-01-12", "--verbose"]
    )

    assert quiet.exit_code == 0
    assert "Swapped" not in quiet.output
    assert verbose.exit_code == 0
    assert "Skipped 2020-01-10 to 2020-01-10" in verbose.output
    assert "Swapped reversed dates 2020-01-12 to 2020-01-10" in verbose.output


@pytest.mark.parametrize(
    "account_id, token", [("foo", None), (None, "bar"), ("", "bar")]
)
def test_get_with_partial_config_is_reported(
    config_path: Path, fake_tempo: FakeTempo, account_id, token
) -> None:
    CONFIGURATION_REPO.update_config(account_id=account_id, token=token)
    CONFIGURATION_REPO.flush()

    result = runner.invoke(app, ["get"])

    assert result.exit_code == 1
    assert "haven't run the config command" in result.output
    assert fake_tempo.calls == []


@pytest.mark.parametrize(
    "plan, message",
    [
        ({"planItem": {"self": "https://x/issue/ABC-123"}}, "'dates'"),
        ({"dates": {"values": []}}, "'planItem'"),
        (
            make_plan("https://x/issue/ABC-123", [("2020-01-10", "2020-01-10", "2h")]),  # type: ignore[list-item]
            "'2h'",
        ),
    ],
)
def test_get_reports_malformed_records(
    configured: Path, fake_tempo: FakeTempo, plan, message: str
) -> None:
    fake_tempo.respond_with([plan])

    result = runner.invoke(app, ["get", "--from", "2020-01-10", "--to", "2020-01-10"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Malformed" in result.output
    assert message in result.output
    assert "Planned time for" not in result.output


@pytest.mark.parametrize("command", [["get"], ["config"], ["config", "--token", "x"]])
def test_unreadable_config_is_reported(config_path: Path, command: list[str]) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text("- not\n- a mapping\n")

    result = runner.invoke(app, command)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "is not a mapping" in " ".join(result.output.split())
