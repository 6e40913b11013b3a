from __future__ import annotations

import copy
from dataclasses import asdict
from datetime import datetime, timedelta, timezone

import pytest

from pawcast.scoring.forecast import (
    FORECAST_WINDOW,
    ForecastDataError,
    format_hour_label,
    kelvin_to_celsius,
    process_forecast_data,
)

from payloads import air_entry, forecast_entry, forecast_series

T = datetime(2024, 5, 1, 6, 0)


def air_series(*entries):
    return {"list": list(entries)}


def test_absent_series_yield_no_points() -> None:
    air = air_series(air_entry(T))
    assert process_forecast_data(None, air) == []
    assert process_forecast_data({"list": []}, air) == []
    assert process_forecast_data({"list": forecast_series(2)}, None) == []
    assert process_forecast_data({"list": forecast_series(2)}, {"list": []}) == []
    assert process_forecast_data({}, {}) == []


def test_truncates_to_window() -> None:
    points = process_forecast_data({"list": forecast_series(40)}, air_series(air_entry(T)))
    assert len(points) == FORECAST_WINDOW == 8


def test_short_series_is_kept_whole() -> None:
    points = process_forecast_data({"list": forecast_series(3)}, air_series(air_entry(T)))
    assert len(points) == 3


def test_picks_nearest_air_quality_entry() -> None:
    weather = {"list": [forecast_entry("2024-05-01 06:00:00")]}
    air = air_series(
        air_entry(T - timedelta(minutes=90), pm10=70.0, pm25=30.0),
        air_entry(T + timedelta(minutes=30), pm10=20.0, pm25=8.0),
    )
    [point] = process_forecast_data(weather, air)
    assert (point.pm10, point.pm25) == (20.0, 8.0)


def test_equal_distance_keeps_first_entry() -> None:
    weather = {"list": [forecast_entry("2024-05-01 06:00:00")]}
    air = air_series(
        air_entry(T - timedelta(hours=1), pm10=44.0),
        air_entry(T + timedelta(hours=1), pm10=11.0),
    )
    [point] = process_forecast_data(weather, air)
    assert point.pm10 == 44.0


def test_point_fields_are_display_ready() -> None:
    weather = {"list": [forecast_entry("2024-05-01 06:00:00", temp_c=22.0, humidity=45, wind=3.5, pop=0.125, condition="Clouds")]}
    [point] = process_forecast_data(weather, air_series(air_entry(T, pm10=25.0, pm25=12.0)))

    assert point.time == "오후 3시"
    assert point.weather == "Clouds"
    assert point.temp == 22.0
    assert point.pop == 13
    assert point.humidity == 45
    assert point.wind == 3.5
    assert (point.pm10, point.pm25) == (25.0, 12.0)


@pytest.mark.parametrize(
    "utc_hour, label",
    [(6, "오후 3시"), (15, "오전 12시"), (3, "오후 12시"), (0, "오전 9시"), (21, "오전 6시")],
)
def test_labels_are_korean_local_time(utc_hour: int, label: str) -> None:
    assert format_hour_label(datetime(2024, 5, 1, utc_hour, tzinfo=timezone.utc)) == label


def test_kelvin_conversion() -> None:
    assert kelvin_to_celsius(295.15) == 22.0
    assert kelvin_to_celsius(273.15) == 0.0
    assert kelvin_to_celsius(263.15) == -10.0


def test_malformed_entry_fails_whole_series() -> None:
    broken = forecast_entry("2024-05-01 09:00:00")
    del broken["main"]
    weather = {"list": [forecast_entry("2024-05-01 06:00:00"), broken]}

    with pytest.raises(ForecastDataError, match="main"):
        process_forecast_data(weather, air_series(air_entry(T)))


def test_bad_timestamp_is_rejected() -> None:
    weather = {"list": [forecast_entry("yesterday")]}
    with pytest.raises(ForecastDataError):
        process_forecast_data(weather, air_series(air_entry(T)))


def test_malformed_air_entry_is_rejected() -> None:
    weather = {"list": [forecast_entry("2024-05-01 06:00:00")]}
    with pytest.raises(ForecastDataError):
        process_forecast_data(weather, air_series({"dt": 1714543200, "components": {"pm10": 10}}))


def test_air_entry_without_timestamp_is_rejected() -> None:
    weather = {"list": [forecast_entry("2024-05-01 06:00:00")]}
    undated = {"components": {"pm10": 99.0, "pm2_5": 50.0}}
    with pytest.raises(ForecastDataError, match="dt"):
        process_forecast_data(weather, air_series(air_entry(T), undated))


def test_entries_past_the_window_are_not_inspected() -> None:
    entries = forecast_series(8) + [{"dt_txt": "garbage"}]
    points = process_forecast_data({"list": entries}, air_series(air_entry(T)))
    assert len(points) == 8


def test_same_input_gives_same_points() -> None:
    weather = {"list": forecast_series(10)}
    air = air_series(air_entry(T), air_entry(T + timedelta(hours=1)))
    weather_before, air_before = copy.deepcopy(weather), copy.deepcopy(air)

    first = process_forecast_data(weather, air)
    second = process_forecast_data(weather, air)

    assert first == second
    assert [asdict(point) for point in first] == [asdict(point) for point in second]
    assert weather == weather_before
    assert air == air_before
