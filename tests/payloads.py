"""Raw OpenWeather payload builders shared by the test modules."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List


def kelvin(celsius: float) -> float:
    return round(celsius + 273.15, 2)


def current_weather(
    temp_c: float = 22.0,
    humidity: float = 50,
    wind: float = 2.0,
    name: str = "Seoul",
    condition: str = "Clear",
) -> Dict[str, Any]:
    return {
        "coord": {"lat": 37.56, "lon": 126.97},
        "name": name,
        "main": {"temp": kelvin(temp_c), "feels_like": kelvin(temp_c - 0.5), "humidity": humidity},
        "wind": {"speed": wind, "deg": 180},
        "weather": [{"id": 800, "main": condition, "description": "clear sky"}],
    }


def air_pollution(pm10: float = 25.0, pm25: float = 12.0, dt: int = 1714546800) -> Dict[str, Any]:
    return {"list": [{"dt": dt, "main": {"aqi": 1}, "components": {"pm10": pm10, "pm2_5": pm25}}]}


def forecast_entry(
    dt_txt: str,
    temp_c: float = 22.0,
    humidity: float = 50,
    wind: float = 2.0,
    pop: float = 0.0,
    condition: str = "Clear",
) -> Dict[str, Any]:
    return {
        "dt_txt": dt_txt,
        "main": {"temp": kelvin(temp_c), "humidity": humidity},
        "wind": {"speed": wind},
        "weather": [{"main": condition}],
        "pop": pop,
    }


def air_entry(moment: datetime, pm10: float = 25.0, pm25: float = 12.0) -> Dict[str, Any]:
    return {"dt": int(moment.replace(tzinfo=timezone.utc).timestamp()), "components": {"pm10": pm10, "pm2_5": pm25}}


def forecast_series(count: int, start_hour: int = 0) -> List[Dict[str, Any]]:
    entries = []
    for index in range(count):
        hour = start_hour + index * 3
        day, hour = 1 + hour // 24, hour % 24
        entries.append(forecast_entry(f"2024-05-{day:02d} {hour:02d}:00:00"))
    return entries
