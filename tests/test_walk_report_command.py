from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from payloads import air_pollution, current_weather

OPENWEATHER = "https://api.openweathermap.org/data/2.5"


def run(**options) -> dict:
    out = StringIO()
    call_command("walk_report", stdout=out, **options)
    return json.loads(out.getvalue())


def test_sample_report_runs_offline(requests_mock) -> None:
    payload = run(city="test")

    assert payload["current"]["name"] == "Seoul"
    assert payload["current"]["walking_score"]["score"] == 100
    assert [item["time"] for item in payload["forecast"]] == ["오후 3시", "오후 6시"]
    assert requests_mock.call_count == 0


def test_report_for_coordinates(requests_mock) -> None:
    requests_mock.get(f"{OPENWEATHER}/weather", json=current_weather())
    requests_mock.get(f"{OPENWEATHER}/air_pollution", json=air_pollution())
    requests_mock.get(f"{OPENWEATHER}/forecast", json={"list": []})
    requests_mock.get(f"{OPENWEATHER}/air_pollution/forecast", json={"list": []})

    payload = run(lat=37.5665, lon=126.978)

    assert payload["current"]["ratings"]["pm10"] == "좋음"
    assert payload["forecast"] == []


def test_report_requires_coordinates() -> None:
    with pytest.raises(CommandError):
        call_command("walk_report")
    with pytest.raises(CommandError, match="city=test"):
        call_command("walk_report", city="Busan")


def test_provider_failure_is_command_error(requests_mock) -> None:
    requests_mock.get(f"{OPENWEATHER}/weather", status_code=503)
    with pytest.raises(CommandError, match="Weather provider failed"):
        call_command("walk_report", lat=1.0, lon=2.0)
