from __future__ import annotations

import os
import tempfile

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pawcast.settings")
os.environ.setdefault("OPEN_WEATHER_API_KEY", "test-key")
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "maps-key")
os.environ.setdefault("CUSTOM_SEARCH_API_KEY", "search-key")
os.environ.setdefault("SEARCH_ENGINE_ID", "engine-id")
os.environ.setdefault("YOUTUBE_API_KEY", "youtube-key")
os.environ.setdefault("NAVER_CLIENT_ID", "naver-id")
os.environ.setdefault("NAVER_CLIENT_SECRET", "naver-secret")
os.environ.setdefault("SUPABASE_URL", "https://auth.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")
os.environ.setdefault("SAVES_DATABASE_URL", f"sqlite:///{tempfile.mkdtemp()}/saves.db")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def _fresh_clients():
    from pawcast.api import clients

    clients.reset_clients()
    yield
    clients.reset_clients()
