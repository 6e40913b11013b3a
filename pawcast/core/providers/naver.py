"""Naver shopping search provider."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pawcast.core.providers.base import HttpProvider, dog_query

PRODUCTS_PER_PAGE = 20


class NaverShoppingProvider(HttpProvider):
    name = "naver-shopping"
    base_url = "https://openapi.naver.com/v1/search/shop.json"

    def __init__(
        self,
        *,
        client_id: Optional[str],
        client_secret: Optional[str],
        base_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = base_url or self.base_url

    def search(self, query: str, start: int = 1) -> Dict[str, Any]:
        """Raw search page: ``{"items": [...], "total": int, ...}``."""
        self._require(client_id=self.client_id, client_secret=self.client_secret)
        return self._get_json(
            self.base_url,
            params={
                "query": dog_query(query),
                "display": PRODUCTS_PER_PAGE,
                "start": start,
                "sort": "sim",
            },
            headers={
                "X-Naver-Client-Id": self.client_id,
                "X-Naver-Client-Secret": self.client_secret,
            },
        )


__all__ = ["NaverShoppingProvider", "PRODUCTS_PER_PAGE"]
