"""Core abstractions for the walking domain."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol


class Rating(str, Enum):
    """Qualitative level assigned to a single environmental factor."""

    GOOD = "좋음"
    FAIR = "보통"
    CAUTION = "주의"


@dataclass(frozen=True)
class EnvironmentalReading:
    """Snapshot of the five measurements the walking score is built from.

    Values are stored in the units the classifiers expect:
    - temperature in Celsius
    - humidity in percent
    - wind speed in metres per second (m/s)
    - particulate matter in micrograms per cubic metre
    """

    temperature_c: float
    humidity: float
    wind_speed_ms: float
    pm10: float
    pm25: float


@dataclass(frozen=True)
class FactorRatings:
    temperature: Rating
    humidity: Rating
    wind: Rating
    pm10: Rating
    pm25: Rating

    def as_dict(self) -> Dict[str, str]:
        return {name: rating.value for name, rating in asdict(self).items()}


@dataclass(frozen=True)
class WalkingScore:
    score: int
    comment: str
    time: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"score": self.score, "comment": self.comment}
        if self.time:
            payload = {"time": self.time, **payload}
        return payload


@dataclass(frozen=True)
class ForecastPoint:
    """One aligned weather + air quality bundle for the short-range forecast."""

    time: str
    weather: str
    temp: float
    pop: int
    pm10: float
    pm25: float
    humidity: float
    wind: float

    def reading(self) -> EnvironmentalReading:
        return EnvironmentalReading(
            temperature_c=self.temp,
            humidity=self.humidity,
            wind_speed_ms=self.wind,
            pm10=self.pm10,
            pm25=self.pm25,
        )


@dataclass(frozen=True)
class ForecastRecommendation:
    time: str
    score: int
    comment: str
    grade: str


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    weather: str
    temperature_c: float
    feels_like_c: float
    humidity: float
    wind_speed_ms: float
    pm10: float
    pm25: float
    ratings: FactorRatings
    walking_score: WalkingScore

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["ratings"] = self.ratings.as_dict()
        payload["walking_score"] = self.walking_score.as_dict()
        return payload


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated account resolved from a bearer token."""

    id: str
    email: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return True


@dataclass
class SavedItem:
    id: str
    user_id: str
    content_type: str
    content_id: str
    content_data: Any = field(default_factory=dict)
    created_at: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload.pop("user_id")
        return payload


class SavedItemRepository(Protocol):
    """Persistence surface for bookmarks owned by a single user."""

    def list_for(self, user: CurrentUser) -> List[SavedItem]:
        ...

    def is_saved(self, user: CurrentUser, content_type: str, content_id: str) -> bool:
        ...

    def save(self, user: CurrentUser, content_type: str, content_id: str, content_data: Any) -> SavedItem:
        ...

    def delete(self, user: CurrentUser, content_type: str, content_id: str) -> bool:
        ...


__all__ = [
    "Rating",
    "EnvironmentalReading",
    "FactorRatings",
    "WalkingScore",
    "ForecastPoint",
    "ForecastRecommendation",
    "CurrentConditions",
    "CurrentUser",
    "SavedItem",
    "SavedItemRepository",
]
