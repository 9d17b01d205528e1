"""WeatherSummary Schema"""

from dataclasses import dataclass, field

from .weather_record import WeatherRecord


@dataclass(frozen=True)
class WeatherSummary:
    """
    Represents the result of analyzing a whole dataset,
    which is an aggregation of multiple WeatherRecord instances.

    Attributes:
        month (int): Month (1-12) the average temperature was computed for.
        threshold (float): Temperature threshold used to select hot days.
        average_temperature (float): Average temperature for the month,
            NaN if the dataset holds no record for it.
        days_above (list[WeatherRecord]): Records strictly above the threshold,
            in dataset order.
        rainy_days (int): Number of records with precipitation.
        record_count (int): Number of records in the dataset.
        category_counts (dict[str, int]): Number of records per weather category.
    """

    month: int
    threshold: float
    average_temperature: float
    days_above: list[WeatherRecord]
    rainy_days: int
    record_count: int
    category_counts: dict[str, int] = field(default_factory=dict)

    @property
    def days_above_count(self) -> int:
        """Number of records strictly above the threshold."""
        return len(self.days_above)
