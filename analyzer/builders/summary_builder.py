"""
Module for turning a loaded weather dataset into a summary record.
"""

import calendar
import logging
import math
from typing import Sequence

from analyzer.schema import WeatherRecord, WeatherSummary
from analyzer.statistics import (
    average_temperature,
    count_categories,
    count_rainy_days,
    days_above_temperature,
)

SUMMARY_TEMPLATE = """\
Weather Data Summary:
---------------------
Average Temperature for {month_name}: {average}°C
Number of days above {threshold}°C: {days_above}
Number of rainy days: {rainy_days}
"""


class SummaryBuilder:
    """
    Processes the records of a dataset into a WeatherSummary.
    """

    def __init__(
        self,
        records: Sequence[WeatherRecord],
        month: int,
        threshold: float,
    ):
        """
        Initialize the SummaryBuilder.
        Args:
            records (Sequence[WeatherRecord]): The loaded dataset.
            month (int): Month (1-12) to average the temperature over.
            threshold (float): Temperature above which a day counts as hot.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")

        self.records = records
        self.month = month
        self.threshold = threshold

    def run(self) -> WeatherSummary:
        """
        Process the records and return the WeatherSummary.
        """
        if len(self.records) == 0:
            logging.warning("No records to analyze.")

        summary = self._generate_record()
        logging.debug("Category breakdown: %s", summary.category_counts)

        return summary

    def _generate_record(self) -> WeatherSummary:
        return WeatherSummary(
            month=self.month,
            threshold=self.threshold,
            average_temperature=self.calculate_average_temperature(),
            days_above=self.calculate_days_above(),
            rainy_days=self.calculate_rainy_days(),
            record_count=len(self.records),
            category_counts=self.calculate_categories(),
        )

    def calculate_average_temperature(self) -> float:
        """
        Calculate the average temperature for the configured month.
        Returns:
            float: The average, or NaN if the month has no records.
        """
        return average_temperature(self.records, self.month)

    def calculate_days_above(self) -> list[WeatherRecord]:
        """
        Find the records strictly above the configured threshold.
        """
        return days_above_temperature(self.records, self.threshold)

    def calculate_rainy_days(self) -> int:
        return count_rainy_days(self.records)

    def calculate_categories(self) -> dict[str, int]:
        return count_categories(self.records)


def format_summary(summary: WeatherSummary) -> str:
    """
    Render a WeatherSummary as the printable summary block.

    Args:
        summary (WeatherSummary): The summary to render.

    Returns:
        str: The summary text, ending with a newline.
    """
    if math.isnan(summary.average_temperature):
        average = "NaN"
    else:
        average = f"{summary.average_temperature:.2f}"

    return SUMMARY_TEMPLATE.format(
        month_name=calendar.month_name[summary.month],
        average=average,
        threshold=format_threshold(summary.threshold),
        days_above=summary.days_above_count,
        rainy_days=summary.rainy_days,
    )


def format_threshold(threshold: float) -> str:
    """Render whole thresholds without decimals and others at full precision."""
    threshold = float(threshold)
    if threshold.is_integer():
        return str(int(threshold))
    return repr(threshold)
