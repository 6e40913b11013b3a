"""Paginated product, blog and video search."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pawcast.core.providers.google_search import RESULTS_PER_PAGE, CustomSearchProvider, YouTubeProvider
from pawcast.core.providers.naver import PRODUCTS_PER_PAGE, NaverShoppingProvider
from pawcast.scoring.products import categorize_product_by_title


def next_product_start(start: int, total: int) -> Optional[int]:
    candidate = start + PRODUCTS_PER_PAGE
    return candidate if candidate <= total else None


def next_blog_start(start: int, total: int, page_size: int) -> Optional[int]:
    candidate = start + RESULTS_PER_PAGE
    if page_size == 0 or candidate > total:
        return None
    return candidate


class SearchService:
    def __init__(
        self,
        shopping: NaverShoppingProvider,
        web: CustomSearchProvider,
        videos: YouTubeProvider,
    ) -> None:
        self.shopping = shopping
        self.web = web
        self.videos = videos

    def products(self, query: str, start: int = 1) -> Dict[str, Any]:
        """One page of products, each tagged with its title categories."""
        data = self.shopping.search(query, start=start)
        products = [
            {**item, "categories": categorize_product_by_title(item.get("title") or "")}
            for item in data.get("items") or []
        ]
        total = int(data.get("total") or 0)
        return {"products": products, "nextStart": next_product_start(start, total)}

    def blogs(self, query: str, start_index: int = 1) -> Dict[str, Any]:
        data = self.web.search(query, start_index=start_index)
        blogs = data["blogs"]
        return {"blogs": blogs, "nextStartIndex": next_blog_start(start_index, data["total"], len(blogs))}

    def youtube(self, query: str, page_token: Optional[str] = None) -> Dict[str, Any]:
        return self.videos.search(query, page_token=page_token)


__all__ = ["SearchService", "next_product_start", "next_blog_start"]
