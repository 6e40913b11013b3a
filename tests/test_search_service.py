from __future__ import annotations

from typing import Any, Dict, Optional

import pytest

from pawcast.core.services.search import SearchService, next_blog_start, next_product_start


class ShoppingStub:
    def __init__(self, payload: Dict[str, Any]) -> None:
        self.payload = payload
        self.calls = []

    def search(self, query: str, start: int = 1) -> Dict[str, Any]:
        self.calls.append((query, start))
        return self.payload


class WebStub:
    def __init__(self, blogs, total: int) -> None:
        self.blogs = blogs
        self.total = total

    def search(self, query: str, start_index: int = 1) -> Dict[str, Any]:
        return {"blogs": self.blogs, "total": self.total}


class VideoStub:
    def search(self, query: str, page_token: Optional[str] = None) -> Dict[str, Any]:
        return {"videos": [], "nextPageToken": page_token}


@pytest.mark.parametrize("start, total, expected", [(1, 100, 21), (81, 100, None), (1, 21, 21), (1, 20, None), (1, 0, None)])
def test_next_product_start(start: int, total: int, expected) -> None:
    assert next_product_start(start, total) == expected


@pytest.mark.parametrize(
    "start, total, page_size, expected",
    [(1, 100, 9, 10), (10, 18, 9, None), (1, 10, 9, 10), (1, 100, 0, None), (91, 100, 9, 100)],
)
def test_next_blog_start(start: int, total: int, page_size: int, expected) -> None:
    assert next_blog_start(start, total, page_size) == expected


def test_products_are_tagged_with_categories() -> None:
    shopping = ShoppingStub({"total": 45, "items": [{"title": "강아지 <b>사료</b> 2kg"}, {"title": "산책 하네스"}]})
    service = SearchService(shopping=shopping, web=WebStub([], 0), videos=VideoStub())

    result = service.products("사료", start=21)

    assert shopping.calls == [("사료", 21)]
    assert result["nextStart"] == 41
    first, second = result["products"]
    assert first["title"] == "강아지 <b>사료</b> 2kg"
    assert first["categories"]["food"] == ["사료"]
    assert second["categories"]["walking"] == ["하네스"]


def test_last_product_page_has_no_next_start() -> None:
    service = SearchService(shopping=ShoppingStub({"total": 30, "items": []}), web=WebStub([], 0), videos=VideoStub())
    assert service.products("간식", start=21) == {"products": [], "nextStart": None}


def test_blogs_pagination() -> None:
    blogs = [{"title": str(index)} for index in range(9)]
    service = SearchService(shopping=ShoppingStub({}), web=WebStub(blogs, 20), videos=VideoStub())

    assert service.blogs("산책")["nextStartIndex"] == 10
    assert service.blogs("산책", start_index=19)["nextStartIndex"] is None


def test_youtube_passthrough() -> None:
    service = SearchService(shopping=ShoppingStub({}), web=WebStub([], 0), videos=VideoStub())
    assert service.youtube("훈련", page_token="abc") == {"videos": [], "nextPageToken": "abc"}
