"""Pydantic schemas for the raw OpenWeather payloads the scoring core consumes.

Only the fields the core reads are declared; everything else in the provider
response is ignored.  Validation failures surface as
:class:`pydantic.ValidationError` and are translated by the callers into
domain errors with a readable message.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "CurrentWeatherPayload",
    "AirPollutionPayload",
    "ForecastWeatherPayload",
    "ForecastWeatherEntry",
    "AirPollutionForecastPayload",
    "AirPollutionEntry",
    "describe_validation_error",
]

DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class MainBlock(_Payload):
    temp: float
    humidity: float


class CurrentMainBlock(MainBlock):
    feels_like: float


class WindBlock(_Payload):
    speed: float


class ConditionBlock(_Payload):
    main: str


class Components(_Payload):
    pm10: float
    pm2_5: float


class CurrentWeatherPayload(_Payload):
    name: str
    main: CurrentMainBlock
    wind: WindBlock
    weather: List[ConditionBlock] = Field(min_length=1)


class AirPollutionEntry(_Payload):
    dt: int
    components: Components

    @property
    def timestamp(self) -> datetime:
        return datetime.fromtimestamp(self.dt, tz=timezone.utc)


class AirPollutionPayload(_Payload):
    list: List[AirPollutionEntry] = Field(min_length=1)


class ForecastWeatherEntry(_Payload):
    dt_txt: str
    main: MainBlock
    wind: WindBlock
    weather: List[ConditionBlock] = Field(min_length=1)
    pop: float = Field(ge=0.0, le=1.0)

    @field_validator("dt_txt")
    @classmethod
    def _check_dt_txt(cls, value: str) -> str:
        datetime.strptime(value, DT_TXT_FORMAT)
        return value

    @property
    def timestamp(self) -> datetime:
        """Entry time; OpenWeather sends ``dt_txt`` in UTC without an offset."""
        return datetime.strptime(self.dt_txt, DT_TXT_FORMAT).replace(tzinfo=timezone.utc)


class ForecastWeatherPayload(_Payload):
    list: List[ForecastWeatherEntry]


class AirPollutionForecastPayload(_Payload):
    list: List[AirPollutionEntry]


def describe_validation_error(exc) -> str:
    """Flatten a pydantic error into ``loc: message`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)
