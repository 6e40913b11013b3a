from __future__ import annotations

from pawcast.scoring.products import CATEGORIES, categorize_product_by_title


def test_tags_every_matching_category() -> None:
    tags = categorize_product_by_title("강아지 사료와 장난감")

    assert tags["food"] == ["사료"]
    assert tags["toy"] == ["장난감"]
    assert tags["hygiene"] == tags["apparel"] == tags["walking"] == tags["home"] == []


def test_unmatched_title_has_all_categories_empty() -> None:
    tags = categorize_product_by_title("Premium Dog Bowl")
    assert set(tags) == set(CATEGORIES)
    assert all(matches == [] for matches in tags.values())


def test_empty_title() -> None:
    assert categorize_product_by_title("") == {category: [] for category in CATEGORIES}


def test_substring_matches_inside_words() -> None:
    # "공" is a toy keyword and also sits inside 공기청정기
    assert categorize_product_by_title("반려견 공기청정기")["toy"] == ["공"]


def test_several_keywords_in_one_category() -> None:
    tags = categorize_product_by_title("하네스 + 리드줄 세트, 목줄 포함")
    assert tags["walking"] == ["목줄", "하네스", "리드줄"]


def test_matching_is_case_sensitive() -> None:
    assert categorize_product_by_title("TOY")["toy"] == []
