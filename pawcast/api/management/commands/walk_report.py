"""Management command to print a walking report using the same stack as the API."""
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict

from django.core.management.base import BaseCommand, CommandError

from pawcast.api.clients import get_walking_service
from pawcast.core.providers.base import ProviderError
from pawcast.scoring.composite import ScoringError
from pawcast.scoring.orchestrator import current_conditions, forecast_recommendations
from pawcast.scoring.forecast import process_forecast_data

# Seoul City Hall, 2024-05-01 afternoon.
SAMPLE_WEATHER = {
    "name": "Seoul",
    "main": {"temp": 295.15, "feels_like": 294.65, "humidity": 50},
    "wind": {"speed": 2.0},
    "weather": [{"main": "Clear"}],
}
SAMPLE_AIR = {"list": [{"dt": 1714546800, "components": {"pm10": 25.0, "pm2_5": 12.0}}]}
SAMPLE_FORECAST = {
    "list": [
        {
            "dt_txt": "2024-05-01 06:00:00",
            "main": {"temp": 296.15, "humidity": 45},
            "wind": {"speed": 3.5},
            "weather": [{"main": "Clouds"}],
            "pop": 0.1,
        },
        {
            "dt_txt": "2024-05-01 09:00:00",
            "main": {"temp": 291.15, "humidity": 70},
            "wind": {"speed": 1.2},
            "weather": [{"main": "Rain"}],
            "pop": 0.65,
        },
    ]
}
SAMPLE_AIR_FORECAST = {
    "list": [
        {"dt": 1714543200, "components": {"pm10": 42.0, "pm2_5": 20.0}},
        {"dt": 1714554000, "components": {"pm10": 18.0, "pm2_5": 9.0}},
    ]
}


def _sample_report() -> Dict[str, Any]:
    points = process_forecast_data(SAMPLE_FORECAST, SAMPLE_AIR_FORECAST)
    return {
        "current": current_conditions(SAMPLE_WEATHER, SAMPLE_AIR).as_dict(),
        "forecast": [asdict(item) for item in forecast_recommendations(points)],
    }


class Command(BaseCommand):
    help = "Print the current walking score and the forecast recommendations for a location"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--city", type=str, help="City name (only city=test sample is supported)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options.get("city")
        latitude = options.get("lat")
        longitude = options.get("lon")

        if city:
            if city != "test":
                raise CommandError("Only city=test sample is supported")
            payload = _sample_report()
        else:
            if latitude is None or longitude is None:
                raise CommandError("--lat and --lon are required unless using city=test")
            try:
                payload = get_walking_service().report(latitude, longitude)
            except ProviderError as exc:
                raise CommandError(f"Weather provider failed: {exc}") from exc
            except ScoringError as exc:
                raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(payload, ensure_ascii=False))
