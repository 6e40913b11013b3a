"""Per-factor walking ratings.

Every classifier is total: any float, including negative, huge and
non-finite values, maps to a :class:`Rating`.  Non-finite readings are rated
``CAUTION`` since nothing can be said about them.
"""
from __future__ import annotations

import math

from pawcast.core.abstractions import Rating

# Comfortable band for a dog walk, in Celsius.
TEMPERATURE_GOOD = (10.0, 25.0)
TEMPERATURE_FAIR = (0.0, 30.0)

# Relative humidity, percent.
HUMIDITY_GOOD = (40.0, 60.0)
HUMIDITY_FAIR = (20.0, 80.0)

# Ascending ladders: (good upper bound, fair upper bound).
WIND_LADDER = (3.0, 7.0)
# Korean air quality index breakpoints (µg/m³).
PM10_LADDER = (30.0, 80.0)
PM25_LADDER = (15.0, 35.0)


def _banded(value: float, good: tuple, fair: tuple) -> Rating:
    if not math.isfinite(value):
        return Rating.CAUTION
    if good[0] <= value <= good[1]:
        return Rating.GOOD
    if fair[0] <= value <= fair[1]:
        return Rating.FAIR
    return Rating.CAUTION


def _ladder(value: float, bounds: tuple) -> Rating:
    if not math.isfinite(value):
        return Rating.CAUTION
    good_max, fair_max = bounds
    if value <= good_max:
        return Rating.GOOD
    if value <= fair_max:
        return Rating.FAIR
    return Rating.CAUTION


def classify_temperature(celsius: float) -> Rating:
    return _banded(float(celsius), TEMPERATURE_GOOD, TEMPERATURE_FAIR)


def classify_humidity(percent: float) -> Rating:
    return _banded(float(percent), HUMIDITY_GOOD, HUMIDITY_FAIR)


def classify_wind(speed_ms: float) -> Rating:
    return _ladder(float(speed_ms), WIND_LADDER)


def classify_pm10(value: float) -> Rating:
    return _ladder(float(value), PM10_LADDER)


def classify_pm25(value: float) -> Rating:
    return _ladder(float(value), PM25_LADDER)


__all__ = [
    "classify_temperature",
    "classify_humidity",
    "classify_wind",
    "classify_pm10",
    "classify_pm25",
]
