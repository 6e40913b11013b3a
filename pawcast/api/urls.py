"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from pawcast.api import views

urlpatterns = [
    path("weather", views.WeatherView.as_view(), name="weather"),
    path("air-pollution", views.AirPollutionView.as_view(), name="air-pollution"),
    path("walking-score", views.WalkingScoreView.as_view(), name="walking-score"),
    path("forecast", views.ForecastView.as_view(), name="forecast"),
    path("places", views.PlacesView.as_view(), name="places"),
    path("places/recommended", views.RecommendedPlacesView.as_view(), name="places-recommended"),
    path("places/<str:place_id>", views.PlaceDetailView.as_view(), name="place-detail"),
    path("address", views.AddressView.as_view(), name="address"),
    path("products", views.ProductsView.as_view(), name="products"),
    path("websearch", views.WebSearchView.as_view(), name="websearch"),
    path("youtube", views.YouTubeView.as_view(), name="youtube"),
    path("channels", views.ChannelsView.as_view(), name="channels"),
    path("saves", views.SavedItemsView.as_view(), name="saves"),
    path("saves/status", views.SavedItemStatusView.as_view(), name="saves-status"),
]
