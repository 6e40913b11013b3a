"""Walking service that bridges the weather providers with the scoring core."""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pawcast.core.abstractions import CurrentConditions
from pawcast.core.providers.google_maps import GoogleMapsProvider
from pawcast.core.providers.openweather import OpenWeatherProvider
from pawcast.scoring.forecast import process_forecast_data
from pawcast.scoring.orchestrator import current_conditions, forecast_recommendations, recommended_place_query


class WalkingService:
    """Fetch raw weather data and turn it into walking recommendations.

    Nothing is cached here: each call fetches fresh provider data and
    recomputes the scores from scratch.
    """

    def __init__(
        self,
        weather: OpenWeatherProvider,
        places: Optional[GoogleMapsProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.weather = weather
        self.places = places
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def current(self, latitude: float, longitude: float) -> CurrentConditions:
        weather = self.weather.current_weather(latitude, longitude)
        air = self.weather.air_pollution(latitude, longitude)
        conditions = current_conditions(weather, air)
        self._log.debug(
            "Current walking score %s at %.4f,%.4f", conditions.walking_score.score, latitude, longitude
        )
        return conditions

    def forecast(self, latitude: float, longitude: float) -> Dict[str, List[Dict[str, Any]]]:
        weather = self.weather.forecast(latitude, longitude)
        air = self.weather.air_pollution_forecast(latitude, longitude)
        points = process_forecast_data(weather, air)
        if not points:
            self._log.info("No forecast data for %.4f,%.4f", latitude, longitude)
        return {
            "points": [asdict(point) for point in points],
            "recommendations": [asdict(item) for item in forecast_recommendations(points)],
        }

    def recommended_places(self, latitude: float, longitude: float) -> Dict[str, Any]:
        if self.places is None:
            raise RuntimeError("WalkingService was built without a places provider")
        score = self.current(latitude, longitude).walking_score.score
        is_good_weather, query = recommended_place_query(score)
        places = self.places.nearby_places(latitude, longitude, query)
        return {"isGoodWeather": is_good_weather, "query": query, "score": score, "places": places}

    def report(self, latitude: float, longitude: float) -> Dict[str, Any]:
        return {
            "current": self.current(latitude, longitude).as_dict(),
            "forecast": self.forecast(latitude, longitude)["recommendations"],
        }


__all__ = ["WalkingService"]
