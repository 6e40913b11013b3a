"""Google Maps Platform provider: nearby search, distance matrix, details, geocoding."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pawcast.core.providers.base import HttpProvider, ProviderError

ADDRESS_NOT_FOUND = "주소를 찾을 수 없습니다."
NOT_AVAILABLE = "N/A"
PLACE_DETAIL_FIELDS = (
    "name",
    "vicinity",
    "formatted_phone_number",
    "photos",
    "rating",
    "reviews",
    "opening_hours",
    "geometry",
)


class GoogleMapsProvider(HttpProvider):
    name = "google-maps"
    base_url = "https://maps.googleapis.com/maps/api"
    language = "ko"
    search_radius_m = 5000
    travel_mode = "transit"

    def __init__(self, *, api_key: Optional[str], base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    def nearby_places(self, latitude: float, longitude: float, keyword: str) -> List[Dict[str, Any]]:
        """Places matching ``keyword`` within 5 km, with transit distance and duration."""
        self._require(api_key=self.api_key)
        origin = f"{latitude},{longitude}"
        data = self._get_json(
            f"{self.base_url}/place/nearbysearch/json",
            params={
                "location": origin,
                "radius": self.search_radius_m,
                "keyword": keyword,
                "language": self.language,
                "key": self.api_key,
            },
        )
        status = data.get("status")
        if status == "ZERO_RESULTS":
            return []
        self._check_status(data, "nearby search")
        places = data.get("results") or []
        if not places:
            return []

        elements = self._distance_elements(origin, places)
        combined = []
        for index, place in enumerate(places):
            element = elements[index] if index < len(elements) else {}
            combined.append(
                {
                    "id": place.get("place_id"),
                    "name": place.get("name"),
                    "vicinity": place.get("vicinity"),
                    "distance": _text(element.get("distance")),
                    "duration": _text(element.get("duration")),
                    "geometry": place.get("geometry"),
                }
            )
        return combined

    def place_details(self, place_id: str) -> Dict[str, Any]:
        self._require(api_key=self.api_key)
        data = self._get_json(
            f"{self.base_url}/place/details/json",
            params={
                "place_id": place_id,
                "language": self.language,
                "fields": ",".join(PLACE_DETAIL_FIELDS),
                "key": self.api_key,
            },
        )
        self._check_status(data, "place details")
        return data.get("result") or {}

    def reverse_geocode(self, latitude: float, longitude: float) -> str:
        self._require(api_key=self.api_key)
        data = self._get_json(
            f"{self.base_url}/geocode/json",
            params={"latlng": f"{latitude},{longitude}", "language": self.language, "key": self.api_key},
        )
        results = data.get("results") or []
        if data.get("status") != "OK" or not results:
            return ADDRESS_NOT_FOUND
        return results[0].get("formatted_address") or ADDRESS_NOT_FOUND

    # helpers ------------------------------------------------------------
    def _distance_elements(self, origin: str, places: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        destinations = "|".join(
            f"{place['geometry']['location']['lat']},{place['geometry']['location']['lng']}" for place in places
        )
        data = self._get_json(
            f"{self.base_url}/distancematrix/json",
            params={
                "origins": origin,
                "destinations": destinations,
                "mode": self.travel_mode,
                "language": self.language,
                "key": self.api_key,
            },
        )
        rows = data.get("rows") or []
        if not rows:
            return []
        return rows[0].get("elements") or []

    def _check_status(self, data: Dict[str, Any], operation: str) -> None:
        status = data.get("status")
        if status != "OK":
            message = data.get("error_message") or ""
            self._log.error("Google %s failed: %s %s", operation, status, message)
            raise ProviderError(f"Google {operation} error: {status} {message}".strip())


def _text(value: Optional[Dict[str, Any]]) -> str:
    if not value:
        return NOT_AVAILABLE
    return value.get("text") or NOT_AVAILABLE


__all__ = ["GoogleMapsProvider", "ADDRESS_NOT_FOUND"]
