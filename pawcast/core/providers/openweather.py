"""OpenWeather weather and air pollution provider."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pawcast.core.providers.base import HttpProvider


class OpenWeatherProvider(HttpProvider):
    """Integration with the OpenWeather 2.5 endpoints.

    Responses are passed through untouched.  No ``units`` parameter is sent,
    so temperatures arrive in Kelvin and the scoring core converts them.
    """

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5"

    def __init__(self, *, api_key: Optional[str], base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    def current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return self._fetch("weather", latitude, longitude)

    def air_pollution(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return self._fetch("air_pollution", latitude, longitude)

    def forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """5 day / 3 hour forecast."""
        return self._fetch("forecast", latitude, longitude)

    def air_pollution_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Hourly air pollution forecast."""
        return self._fetch("air_pollution/forecast", latitude, longitude)

    def _fetch(self, path: str, latitude: float, longitude: float) -> Dict[str, Any]:
        self._require(api_key=self.api_key)
        params = {"lat": latitude, "lon": longitude, "appid": self.api_key}
        return self._get_json(f"{self.base_url}/{path}", params=params)


__all__ = ["OpenWeatherProvider"]
