"""
Analyzer class for weather data analysis.
"""

import logging

from analyzer.builders import SummaryBuilder, format_summary
from analyzer.loader import load_data, locate
from analyzer.logger import config_logger
from analyzer.schema import WeatherSummary


class Analyzer:
    """Main class for weather data analysis."""

    def __init__(
        self,
        data_file: str,
        month: int = 8,
        threshold: float = 30.0,
        debug: bool = False,
        skip_invalid: bool = False,
    ):
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")

        self.data_file = data_file
        self.month = month
        self.threshold = threshold
        self.skip_invalid = skip_invalid

        config_logger(debug=debug)

    def load(self) -> list:
        """
        Locate the data file and load its records.
        """
        path = locate(self.data_file)
        logging.info("Loading weather data from %s", path)

        records = load_data(path, skip_invalid=self.skip_invalid)
        logging.info("Loaded %d records.", len(records))

        return records

    def run(self) -> WeatherSummary:
        """Main entry point for weather data analysis."""
        records = self.load()

        summary = SummaryBuilder(
            records=records,
            month=self.month,
            threshold=self.threshold,
        ).run()

        print(format_summary(summary))
        logging.info("Analyzer done.")

        return summary
