"""
Weather data analysis module.
Loads daily observations from a CSV file and prints a summary.
"""

import os
import argparse

from dotenv import load_dotenv

from analyzer import Analyzer

load_dotenv(verbose=True, dotenv_path=".env")

DEFAULT_DATA_FILE = "weatherdata.csv"
DEFAULT_MONTH = 8
DEFAULT_THRESHOLD = 30.0


def get_args(argv=None):
    """
    Parse command line arguments for the weather data analyzer.
        :param argv: Arguments to parse, defaults to sys.argv.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Weather Data Analyzer")
    parser.add_argument(
        "--file",
        type=str,
        help="CSV file to analyze (defaults to $WEATHER_DATA_FILE or the bundled data)",
    )
    parser.add_argument(
        "--month",
        type=int,
        default=DEFAULT_MONTH,
        help="Month to average the temperature over.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_THRESHOLD,
        help="Temperature above which a day counts as hot.",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip malformed rows instead of failing",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if not 1 <= args.month <= 12:
        parser.error("--month must be between 1 and 12")

    if args.file is None:
        args.file = os.getenv("WEATHER_DATA_FILE", DEFAULT_DATA_FILE)

    return args


def main(argv=None):
    """Main function to run the weather data analysis."""

    args = get_args(argv)

    main_instance = Analyzer(
        data_file=args.file,
        month=args.month,
        threshold=args.threshold,
        debug=args.debug,
        skip_invalid=args.skip_invalid,
    )

    main_instance.run()


if __name__ == "__main__":
    main()
