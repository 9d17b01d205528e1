"""WeatherRecord Schema"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherRecord:
    """
    Represents a single day of weather observations.

    Attributes:
        date (datetime.date): The day the observation belongs to.
        temperature (float): Temperature in degrees Celsius.
        humidity (float): Relative humidity percentage.
        precipitation (float): Rain amount in millimeters.
    """

    date: datetime.date
    temperature: float
    humidity: float
    precipitation: float

    @property
    def month(self) -> int:
        """Month component (1-12) of the record date."""
        return self.date.month

    @property
    def is_rainy(self) -> bool:
        """True if any precipitation was measured on the day."""
        return self.precipitation > 0
