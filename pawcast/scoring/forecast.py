"""Align the 3-hourly weather forecast with the hourly air quality forecast."""
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from pawcast.core.abstractions import ForecastPoint
from pawcast.core.schemas import (
    AirPollutionEntry,
    AirPollutionForecastPayload,
    ForecastWeatherPayload,
    describe_validation_error,
)
from pawcast.scoring.composite import ScoringError

KST = timezone(timedelta(hours=9), "KST")
FORECAST_WINDOW = 8
KELVIN_OFFSET = 273.15


class ForecastDataError(ScoringError):
    """Raised when a forecast payload is present but malformed."""


def kelvin_to_celsius(kelvin: float) -> float:
    return round(float(kelvin) - KELVIN_OFFSET, 2)


def format_hour_label(moment: datetime) -> str:
    """Render ``moment`` as a Korean 12-hour label in KST, e.g. ``오후 3시``."""
    hour = moment.astimezone(KST).hour
    meridiem = "오후" if hour >= 12 else "오전"
    return f"{meridiem} {hour % 12 or 12}시"


def nearest_entry(entries: Sequence[AirPollutionEntry], moment: datetime) -> AirPollutionEntry:
    """Return the entry closest to ``moment``; ties keep the earliest one seen."""
    best = entries[0]
    best_diff = abs(best.timestamp - moment)
    for entry in entries[1:]:
        diff = abs(entry.timestamp - moment)
        if diff < best_diff:
            best, best_diff = entry, diff
    return best


def _has_series(payload: Optional[Mapping[str, Any]]) -> bool:
    return bool(payload) and bool(payload.get("list"))


def _parse(model, payload: Mapping[str, Any], label: str):
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ForecastDataError(f"malformed {label}: {describe_validation_error(exc)}") from exc


def process_forecast_data(
    forecast_weather: Optional[Mapping[str, Any]],
    forecast_air_pollution: Optional[Mapping[str, Any]],
) -> List[ForecastPoint]:
    """Build up to eight display-ready forecast points.

    Each weather entry (UTC ``dt_txt``) is paired with the air quality entry
    whose ``dt`` is nearest in time.  An absent or empty series yields an
    empty list; a malformed entry raises :class:`ForecastDataError`.
    """
    if not _has_series(forecast_weather) or not _has_series(forecast_air_pollution):
        return []

    window = {"list": list(forecast_weather["list"])[:FORECAST_WINDOW]}
    weather = _parse(ForecastWeatherPayload, window, "weather forecast")
    air = _parse(AirPollutionForecastPayload, forecast_air_pollution, "air pollution forecast")

    points: List[ForecastPoint] = []
    for entry in weather.list:
        moment = entry.timestamp
        closest = nearest_entry(air.list, moment)
        points.append(
            ForecastPoint(
                time=format_hour_label(moment),
                weather=entry.weather[0].main,
                temp=kelvin_to_celsius(entry.main.temp),
                pop=int(math.floor(entry.pop * 100 + 0.5)),
                pm10=closest.components.pm10,
                pm25=closest.components.pm2_5,
                humidity=entry.main.humidity,
                wind=entry.wind.speed,
            )
        )
    return points


__all__ = [
    "KST",
    "FORECAST_WINDOW",
    "ForecastDataError",
    "kelvin_to_celsius",
    "format_hour_label",
    "nearest_entry",
    "process_forecast_data",
]
