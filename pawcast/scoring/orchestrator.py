"""Sequence classifiers and the composite scorer for current and forecast data."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from pawcast.core.abstractions import (
    CurrentConditions,
    EnvironmentalReading,
    FactorRatings,
    ForecastPoint,
    ForecastRecommendation,
    WalkingScore,
)
from pawcast.core.schemas import AirPollutionPayload, CurrentWeatherPayload, describe_validation_error
from pawcast.scoring.composite import ScoringError, total_walking_score
from pawcast.scoring.factors import (
    classify_humidity,
    classify_pm10,
    classify_pm25,
    classify_temperature,
    classify_wind,
)
from pawcast.scoring.forecast import kelvin_to_celsius

GOOD_WEATHER_SCORE = 60
GOOD_WEATHER_PLACE_QUERY = "공원 산책로"
BAD_WEATHER_PLACE_QUERY = "애견 동반 카페"

GRADES = (
    (80, "매우 좋음"),
    (60, "좋음"),
    (40, "보통"),
)
LOWEST_GRADE = "주의"


class WeatherDataError(ScoringError):
    """Raised when a current weather or air quality payload is malformed."""


def classify_reading(reading: EnvironmentalReading) -> FactorRatings:
    return FactorRatings(
        temperature=classify_temperature(reading.temperature_c),
        humidity=classify_humidity(reading.humidity),
        wind=classify_wind(reading.wind_speed_ms),
        pm10=classify_pm10(reading.pm10),
        pm25=classify_pm25(reading.pm25),
    )


def evaluate_reading(reading: EnvironmentalReading, time: Optional[str] = None) -> WalkingScore:
    ratings = classify_reading(reading)
    return _score(ratings, time)


def _score(ratings: FactorRatings, time: Optional[str]) -> WalkingScore:
    return total_walking_score(
        temperature=ratings.temperature,
        humidity=ratings.humidity,
        wind=ratings.wind,
        pm10=ratings.pm10,
        pm25=ratings.pm25,
        time=time,
    )


def score_grade(score: int) -> str:
    for threshold, label in GRADES:
        if score >= threshold:
            return label
    return LOWEST_GRADE


def recommended_place_query(score: int) -> Tuple[bool, str]:
    """Pick a place search for the current score: parks when it is nice out."""
    is_good_weather = score >= GOOD_WEATHER_SCORE
    query = GOOD_WEATHER_PLACE_QUERY if is_good_weather else BAD_WEATHER_PLACE_QUERY
    return is_good_weather, query


def current_conditions(
    current_weather: Mapping[str, Any], current_air_pollution: Mapping[str, Any]
) -> CurrentConditions:
    """Score the "now" snapshot from raw OpenWeather responses (Kelvin)."""
    try:
        weather = CurrentWeatherPayload.model_validate(current_weather)
        air = AirPollutionPayload.model_validate(current_air_pollution)
    except ValidationError as exc:
        raise WeatherDataError(f"malformed current conditions: {describe_validation_error(exc)}") from exc

    components = air.list[0].components
    reading = EnvironmentalReading(
        temperature_c=kelvin_to_celsius(weather.main.temp),
        humidity=weather.main.humidity,
        wind_speed_ms=weather.wind.speed,
        pm10=components.pm10,
        pm25=components.pm2_5,
    )
    ratings = classify_reading(reading)
    return CurrentConditions(
        name=weather.name,
        weather=weather.weather[0].main,
        temperature_c=reading.temperature_c,
        feels_like_c=kelvin_to_celsius(weather.main.feels_like),
        humidity=reading.humidity,
        wind_speed_ms=reading.wind_speed_ms,
        pm10=reading.pm10,
        pm25=reading.pm25,
        ratings=ratings,
        walking_score=_score(ratings, None),
    )


def forecast_recommendations(points: Iterable[ForecastPoint]) -> List[ForecastRecommendation]:
    recommendations: List[ForecastRecommendation] = []
    for point in points:
        result = evaluate_reading(point.reading(), time=point.time)
        recommendations.append(
            ForecastRecommendation(
                time=point.time,
                score=result.score,
                comment=result.comment,
                grade=score_grade(result.score),
            )
        )
    return recommendations


__all__ = [
    "WeatherDataError",
    "classify_reading",
    "evaluate_reading",
    "score_grade",
    "recommended_place_query",
    "current_conditions",
    "forecast_recommendations",
]
