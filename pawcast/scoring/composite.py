"""Weighted composite walking score."""
from __future__ import annotations

import math
from typing import Mapping, Optional, Union

from pawcast.core.abstractions import Rating, WalkingScore

POINTS: Mapping[Rating, int] = {
    Rating.GOOD: 100,
    Rating.FAIR: 50,
    Rating.CAUTION: 0,
}

WEIGHTS: Mapping[str, float] = {
    "temperature": 0.30,
    "humidity": 0.20,
    "wind": 0.10,
    "pm10": 0.20,
    "pm25": 0.20,
}

GREAT_THRESHOLD = 80
OKAY_THRESHOLD = 50

COMMENT_GREAT = "산책하기 아주 좋은 날씨예요! 🐾"
COMMENT_OKAY = "산책하기 괜찮은 날씨예요."
COMMENT_POOR = "산책은 잠시 미루는 게 좋겠어요."

RatingLike = Union[Rating, str]


class ScoringError(ValueError):
    """Base error for the scoring core."""


class UnknownRatingError(ScoringError):
    """Raised when a rating has no entry in the point table."""


def rating_points(rating: RatingLike) -> int:
    try:
        return POINTS[Rating(rating)]
    except (KeyError, ValueError) as exc:
        raise UnknownRatingError(f"no points defined for rating {rating!r}") from exc


def comment_for(score: int) -> str:
    if score >= GREAT_THRESHOLD:
        return COMMENT_GREAT
    if score >= OKAY_THRESHOLD:
        return COMMENT_OKAY
    return COMMENT_POOR


def total_walking_score(
    *,
    temperature: RatingLike,
    humidity: RatingLike,
    wind: RatingLike,
    pm10: RatingLike,
    pm25: RatingLike,
    time: Optional[str] = None,
) -> WalkingScore:
    """Combine five factor ratings into a 0-100 score and a comment.

    ``time`` is carried through untouched so forecast rows keep their label.
    """
    ratings = {
        "temperature": temperature,
        "humidity": humidity,
        "wind": wind,
        "pm10": pm10,
        "pm25": pm25,
    }
    weighted = math.fsum(rating_points(ratings[name]) * weight for name, weight in WEIGHTS.items())
    # half-up, not banker's rounding
    score = int(math.floor(weighted + 0.5))
    return WalkingScore(score=score, comment=comment_for(score), time=time)


__all__ = [
    "POINTS",
    "WEIGHTS",
    "ScoringError",
    "UnknownRatingError",
    "rating_points",
    "comment_for",
    "total_walking_score",
]
