"""Google Custom Search (blogs) and YouTube Data API (videos) providers."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pawcast.core.providers.base import HttpProvider, dog_query

RESULTS_PER_PAGE = 9


class CustomSearchProvider(HttpProvider):
    name = "google-custom-search"
    base_url = "https://www.googleapis.com/customsearch/v1"

    def __init__(
        self,
        *,
        api_key: Optional[str],
        engine_id: Optional[str],
        base_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.engine_id = engine_id
        self.base_url = base_url or self.base_url

    def search(self, query: str, start_index: int = 1) -> Dict[str, Any]:
        """Return ``{"blogs": [...], "total": int}`` for one page."""
        self._require(api_key=self.api_key, engine_id=self.engine_id)
        data = self._get_json(
            self.base_url,
            params={
                "key": self.api_key,
                "cx": self.engine_id,
                "q": dog_query(query),
                "num": RESULTS_PER_PAGE,
                "start": start_index,
            },
        )
        blogs = [
            {
                "title": item.get("title"),
                "link": item.get("link"),
                "snippet": item.get("snippet"),
                "displayLink": item.get("displayLink"),
            }
            for item in data.get("items") or []
        ]
        information = data.get("searchInformation") or {}
        return {"blogs": blogs, "total": int(information.get("totalResults") or 0)}


class YouTubeProvider(HttpProvider):
    name = "youtube"
    base_url = "https://www.googleapis.com/youtube/v3/search"

    def __init__(self, *, api_key: Optional[str], base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    def search(self, query: str, page_token: Optional[str] = None) -> Dict[str, Any]:
        self._require(api_key=self.api_key)
        params: Dict[str, Any] = {
            "key": self.api_key,
            "part": "snippet",
            "q": dog_query(query),
            "type": "video",
            "maxResults": RESULTS_PER_PAGE,
        }
        if page_token:
            params["pageToken"] = page_token
        data = self._get_json(self.base_url, params=params)
        videos: List[Dict[str, Any]] = []
        for item in data.get("items") or []:
            snippet = item.get("snippet") or {}
            thumbnails = snippet.get("thumbnails") or {}
            videos.append(
                {
                    "id": (item.get("id") or {}).get("videoId"),
                    "title": snippet.get("title"),
                    "thumbnailUrl": (thumbnails.get("high") or {}).get("url"),
                    "channelTitle": snippet.get("channelTitle"),
                }
            )
        return {"videos": videos, "nextPageToken": data.get("nextPageToken")}


__all__ = ["CustomSearchProvider", "YouTubeProvider", "RESULTS_PER_PAGE"]
