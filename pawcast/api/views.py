"""REST API views for walking scores, places, search and saved items."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from pawcast.api import clients
from pawcast.core.channels import RECOMMENDED_CHANNELS
from pawcast.core.providers.base import ProviderError, ProviderNotConfigured
from pawcast.core.saves import SavedItemError
from pawcast.scoring.composite import ScoringError


logger = logging.getLogger(__name__)


def parse_coordinates(params) -> Tuple[float, float]:
    try:
        latitude = float(params["lat"])
        longitude = float(params["lon"])
    except KeyError:
        raise ParseError("lat and lon query parameters are required")
    except ValueError:
        raise ParseError("lat and lon must be valid floating point numbers")
    if not -90.0 <= latitude <= 90.0:
        raise ParseError("Latitude must be between -90 and 90")
    if not -180.0 <= longitude <= 180.0:
        raise ParseError("Longitude must be between -180 and 180")
    return latitude, longitude


def required_param(params, name: str) -> str:
    value = (params.get(name) or "").strip()
    if not value:
        raise ParseError(f"{name} query parameter is required")
    return value


def positive_int_param(params, name: str, default: int = 1) -> int:
    raw = params.get(name)
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ParseError(f"{name} must be an integer")
    if value < 1:
        raise ParseError(f"{name} must be at least 1")
    return value


class ProviderAPIView(APIView):
    """Translate provider and upstream data failures into JSON errors."""

    permission_classes = [AllowAny]

    def handle_exception(self, exc):
        if isinstance(exc, ProviderNotConfigured):
            logger.error("%s: %s", self.__class__.__name__, exc)
            return Response({"detail": "Upstream service is not configured"}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        if isinstance(exc, ProviderError):
            logger.warning("%s: upstream failure: %s", self.__class__.__name__, exc)
            return Response({"detail": "Upstream service failed"}, status=status.HTTP_502_BAD_GATEWAY)
        if isinstance(exc, ScoringError):
            logger.error("%s: unusable upstream data: %s", self.__class__.__name__, exc)
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return super().handle_exception(exc)


# Weather -------------------------------------------------------------------
class WeatherView(ProviderAPIView):
    """Raw OpenWeather current conditions (Kelvin)."""

    def get(self, request, *args, **kwargs):  # noqa: D401
        latitude, longitude = parse_coordinates(request.query_params)
        return Response(clients.get_openweather().current_weather(latitude, longitude))


class AirPollutionView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        return Response(clients.get_openweather().air_pollution(latitude, longitude))


class WalkingScoreView(ProviderAPIView):
    """Current conditions with per-factor ratings and the walking score."""

    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        conditions = clients.get_walking_service().current(latitude, longitude)
        return Response(conditions.as_dict())


class ForecastView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        return Response(clients.get_walking_service().forecast(latitude, longitude))


# Places --------------------------------------------------------------------
class PlacesView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        query = required_param(request.query_params, "query")
        return Response(clients.get_google_maps().nearby_places(latitude, longitude, query))


class RecommendedPlacesView(ProviderAPIView):
    """Parks when the walking score is good, dog-friendly cafes otherwise."""

    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        return Response(clients.get_walking_service().recommended_places(latitude, longitude))


class PlaceDetailView(ProviderAPIView):
    def get(self, request, place_id: str, *args, **kwargs):
        if not place_id.strip():
            raise ParseError("Valid Place ID is required")
        return Response(clients.get_google_maps().place_details(place_id))


class AddressView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        latitude, longitude = parse_coordinates(request.query_params)
        return Response({"address": clients.get_google_maps().reverse_geocode(latitude, longitude)})


# Search --------------------------------------------------------------------
class ProductsView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        query = required_param(request.query_params, "query")
        start = positive_int_param(request.query_params, "start")
        return Response(clients.get_search_service().products(query, start=start))


class WebSearchView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        query = required_param(request.query_params, "query")
        start_index = positive_int_param(request.query_params, "startIndex")
        return Response(clients.get_search_service().blogs(query, start_index=start_index))


class YouTubeView(ProviderAPIView):
    def get(self, request, *args, **kwargs):
        query = required_param(request.query_params, "query")
        page_token: Optional[str] = request.query_params.get("pageToken") or None
        return Response(clients.get_search_service().youtube(query, page_token=page_token))


class ChannelsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response([channel.as_dict() for channel in RECOMMENDED_CHANNELS])


# Saved items ---------------------------------------------------------------
class SavedItemsView(APIView):
    """Bookmarks of the signed-in user."""

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        items = clients.get_saved_item_store().list_for(request.user)
        return Response({"items": [item.as_dict() for item in items]})

    def post(self, request, *args, **kwargs):
        data = request.data if isinstance(request.data, dict) else {}
        try:
            item = clients.get_saved_item_store().save(
                request.user,
                content_type=str(data.get("content_type") or ""),
                content_id=str(data.get("content_id") or ""),
                content_data=data.get("content_data"),
            )
        except SavedItemError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(item.as_dict(), status=status.HTTP_201_CREATED)

    def delete(self, request, *args, **kwargs):
        content_type = required_param(request.query_params, "content_type")
        content_id = required_param(request.query_params, "content_id")
        deleted = clients.get_saved_item_store().delete(request.user, content_type, content_id)
        if not deleted:
            return Response({"detail": "Not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


class SavedItemStatusView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        content_type = required_param(request.query_params, "content_type")
        content_id = required_param(request.query_params, "content_id")
        saved = clients.get_saved_item_store().is_saved(request.user, content_type, content_id)
        return Response({"saved": saved})


__all__ = [
    "WeatherView",
    "AirPollutionView",
    "WalkingScoreView",
    "ForecastView",
    "PlacesView",
    "RecommendedPlacesView",
    "PlaceDetailView",
    "AddressView",
    "ProductsView",
    "WebSearchView",
    "YouTubeView",
    "ChannelsView",
    "SavedItemsView",
    "SavedItemStatusView",
]
