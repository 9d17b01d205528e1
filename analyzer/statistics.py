"""
Aggregate statistics over a loaded weather dataset.
"""

from dataclasses import asdict
from typing import Sequence

import numpy as np
import pandas as pd

from analyzer.schema import WeatherRecord

HOT = "Hot"
WARM = "Warm"
COLD = "Cold"
CATEGORIES = (HOT, WARM, COLD)

HOT_THRESHOLD = 35.0
WARM_THRESHOLD = 25.0

COLUMNS = ["date", "month", "temperature", "humidity", "precipitation"]


def records_to_dataframe(dataset: Sequence[WeatherRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record, in dataset order.

    Args:
        dataset (Sequence[WeatherRecord]): The records to convert.

    Returns:
        pd.DataFrame: Columns date, month, temperature, humidity and precipitation.
    """
    rows = [dict(asdict(record), month=record.month) for record in dataset]
    df = pd.DataFrame(rows, columns=COLUMNS)

    return df.astype(
        {
            "month": "int64",
            "temperature": "float64",
            "humidity": "float64",
            "precipitation": "float64",
        }
    )


def average_temperature(dataset: Sequence[WeatherRecord], month: int) -> float:
    """
    Calculate the average temperature of the records in a month.

    Args:
        dataset (Sequence[WeatherRecord]): The records to average.
        month (int): Month number (1-12). Not validated.

    Returns:
        float: The mean temperature, or NaN if no record falls in the month.
    """
    df = records_to_dataframe(dataset)
    temperatures = df.loc[df["month"] == month, "temperature"]

    if temperatures.empty:
        return float("nan")

    return float(temperatures.mean(skipna=False))


def days_above_temperature(
    dataset: Sequence[WeatherRecord], threshold: float
) -> list[WeatherRecord]:
    """
    Find the records with a temperature strictly above the threshold.

    Args:
        dataset (Sequence[WeatherRecord]): The records to filter.
        threshold (float): Temperature threshold, excluded.

    Returns:
        list[WeatherRecord]: Matching records in their original order.
    """
    if len(dataset) == 0:
        return []

    df = records_to_dataframe(dataset)
    positions = np.flatnonzero((df["temperature"] > threshold).to_numpy())

    return [dataset[i] for i in positions]


def count_rainy_days(dataset: Sequence[WeatherRecord]) -> int:
    """
    Count the records with precipitation greater than zero.
    """
    if len(dataset) == 0:
        return 0

    df = records_to_dataframe(dataset)
    return int((df["precipitation"] > 0).sum())


def weather_category(temperature: float) -> str:
    """
    Classify a temperature as "Hot", "Warm" or "Cold".

    Lower bounds are inclusive: 35 and above is Hot, 25 and above is Warm.
    """
    if temperature >= HOT_THRESHOLD:
        return HOT
    if temperature >= WARM_THRESHOLD:
        return WARM
    return COLD


def count_categories(dataset: Sequence[WeatherRecord]) -> dict[str, int]:
    """
    Count the records in each weather category.

    Returns:
        dict[str, int]: One entry per category, zero included.
    """
    df = records_to_dataframe(dataset)
    counts = df["temperature"].map(weather_category).value_counts()

    return {category: int(counts.get(category, 0)) for category in CATEGORIES}


def describe(value) -> str:
    """Describe a value if it is a WeatherRecord."""
    match value:
        case WeatherRecord(date=date):
            return f"Record for date: {date.isoformat()}"
        case _:
            return "Unknown record type"
