"""
Module containing the schema definitions for the weather data analyzer.
"""

from .weather_record import WeatherRecord
from .weather_summary import WeatherSummary

__all__ = [
    "WeatherRecord",
    "WeatherSummary",
]
