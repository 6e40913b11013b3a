"""Process-wide provider, service and store instances built from settings."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from pawcast.core.providers.base import RequestConfig
from pawcast.core.providers.google_maps import GoogleMapsProvider
from pawcast.core.providers.google_search import CustomSearchProvider, YouTubeProvider
from pawcast.core.providers.naver import NaverShoppingProvider
from pawcast.core.providers.openweather import OpenWeatherProvider
from pawcast.core.providers.supabase import SupabaseAuthProvider
from pawcast.core.saves import SavedItemStore
from pawcast.core.services.search import SearchService
from pawcast.core.services.walking import WalkingService


def _request_config() -> RequestConfig:
    return RequestConfig(timeout=settings.PROVIDER_TIMEOUT)


@lru_cache(maxsize=1)
def get_openweather() -> OpenWeatherProvider:
    return OpenWeatherProvider(api_key=settings.OPEN_WEATHER_API_KEY, request_config=_request_config())


@lru_cache(maxsize=1)
def get_google_maps() -> GoogleMapsProvider:
    return GoogleMapsProvider(api_key=settings.GOOGLE_MAPS_API_KEY, request_config=_request_config())


@lru_cache(maxsize=1)
def get_walking_service() -> WalkingService:
    return WalkingService(weather=get_openweather(), places=get_google_maps())


@lru_cache(maxsize=1)
def get_search_service() -> SearchService:
    config = _request_config()
    return SearchService(
        shopping=NaverShoppingProvider(
            client_id=settings.NAVER_CLIENT_ID,
            client_secret=settings.NAVER_CLIENT_SECRET,
            request_config=config,
        ),
        web=CustomSearchProvider(
            api_key=settings.CUSTOM_SEARCH_API_KEY,
            engine_id=settings.SEARCH_ENGINE_ID,
            request_config=config,
        ),
        videos=YouTubeProvider(api_key=settings.YOUTUBE_API_KEY, request_config=config),
    )


@lru_cache(maxsize=1)
def get_auth_provider() -> SupabaseAuthProvider:
    return SupabaseAuthProvider(
        url=settings.SUPABASE_URL,
        anon_key=settings.SUPABASE_ANON_KEY,
        request_config=_request_config(),
    )


@lru_cache(maxsize=1)
def get_saved_item_store() -> SavedItemStore:
    return SavedItemStore.from_url(settings.SAVES_DATABASE_URL)


def reset_clients() -> None:
    """Drop cached instances so the next call rebuilds them from settings."""
    for factory in (
        get_openweather,
        get_google_maps,
        get_walking_service,
        get_search_service,
        get_auth_provider,
        get_saved_item_store,
    ):
        factory.cache_clear()


__all__ = [
    "get_openweather",
    "get_google_maps",
    "get_walking_service",
    "get_search_service",
    "get_auth_provider",
    "get_saved_item_store",
    "reset_clients",
]
