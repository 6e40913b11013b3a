"""Keyword tagging for shopping search results."""
from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

CATEGORIES: Mapping[str, Tuple[str, ...]] = {
    "food": ("사료", "간식", "캔", "우유", "영양제", "껌"),
    "toy": ("장난감", "토이", "노즈워크", "공", "인형"),
    "hygiene": ("샴푸", "브러쉬", "발톱깎이", "배변패드", "기저귀", "탈취제", "물티슈", "치약", "칫솔"),
    "apparel": ("옷", "신발", "양말", "케이프", "악세사리"),
    "walking": ("목줄", "하네스", "리드줄", "이동가방", "유모차"),
    "home": ("켄넬", "집", "울타리", "방석", "쿠션", "계단", "매트", "식기"),
}


def categorize_product_by_title(title: str) -> Dict[str, List[str]]:
    """Return every category keyword that appears in ``title``.

    Matching is plain, case-sensitive substring search, so "공" also matches
    inside "공기청정기".  All six categories are always present in the result.
    """
    return {
        category: [keyword for keyword in keywords if keyword in title]
        for category, keywords in CATEGORIES.items()
    }


__all__ = ["CATEGORIES", "categorize_product_by_title"]
