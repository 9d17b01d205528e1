"""
Module for loading daily weather observations from CSV data.

The expected layout is one header line followed by lines of
``date,temperature,humidity,precipitation``. Fields are separated by a
plain comma, quoting is not supported.
"""

import datetime
import importlib.resources
import logging
import os
import pathlib
import re

from analyzer.schema import WeatherRecord

FIELD_COUNT = 4
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
NUMBER_PATTERN = re.compile(r"^[+-]?(NaN|Infinity|(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)$")


class MalformedRowError(ValueError):
    """
    Raised when a data line can not be turned into a WeatherRecord.

    Attributes:
        line_number (int): 1-based line number in the source, header included.
        line (str): The offending line, without its line terminator.
    """

    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(f"Line {line_number}: {reason} ({line!r})")
        self.line_number = line_number
        self.line = line
        self.reason = reason


def locate(name) -> pathlib.Path:
    """
    Resolve a data file name to a path.

    An existing filesystem path, or any name with a directory part, is
    returned as is. A bare file name that does not exist on disk resolves
    to the file of that name bundled in the ``analyzer/data`` directory.
    The returned path may not exist.
    """
    path = pathlib.Path(name)
    if path.is_file() or path.parent != pathlib.Path("."):
        return path

    bundled = importlib.resources.files("analyzer") / "data" / path.name
    return pathlib.Path(str(bundled))


def parse_date(value: str, line_number: int, line: str) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` date field."""
    if not DATE_PATTERN.match(value):
        raise MalformedRowError(line_number, line, f"invalid date {value!r}")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise MalformedRowError(line_number, line, str(e)) from e


def parse_number(value: str, name: str, line_number: int, line: str) -> float:
    """Parse a decimal field using ``.`` as separator."""
    if not NUMBER_PATTERN.match(value.strip()):
        raise MalformedRowError(line_number, line, f"invalid {name} {value!r}")
    try:
        return float(value)
    except ValueError as e:
        raise MalformedRowError(
            line_number, line, f"invalid {name} {value!r}"
        ) from e


def parse_line(line: str, line_number: int) -> WeatherRecord:
    """
    Parse a single data line into a WeatherRecord.

    Args:
        line (str): The raw line, without its line terminator.
        line_number (int): Position of the line in the source, used in errors.

    Returns:
        WeatherRecord: The parsed record.

    Raises:
        MalformedRowError: If the field count, date or any number is invalid.
    """
    tokens = line.split(",")
    if len(tokens) != FIELD_COUNT:
        raise MalformedRowError(
            line_number, line, f"expected {FIELD_COUNT} fields, got {len(tokens)}"
        )

    return WeatherRecord(
        date=parse_date(tokens[0], line_number, line),
        temperature=parse_number(tokens[1], "temperature", line_number, line),
        humidity=parse_number(tokens[2], "humidity", line_number, line),
        precipitation=parse_number(tokens[3], "precipitation", line_number, line),
    )


def parse_lines(lines, skip_invalid: bool = False) -> list[WeatherRecord]:
    """
    Parse an iterable of lines, the first of which is a header.

    Args:
        lines: Iterable of text lines, or of bytes lines decoded as UTF-8.
        skip_invalid (bool): If True, malformed rows are logged and skipped
            instead of aborting the whole parse.

    Returns:
        list[WeatherRecord]: Records in source order.

    Raises:
        UnicodeDecodeError: If a bytes line is not valid UTF-8.
    """
    records = []

    for line_number, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            line = line.decode("utf-8")

        if line_number == 1:
            continue  # header

        line = line.rstrip("\r\n")
        if not line.strip():
            continue

        try:
            records.append(parse_line(line, line_number))
        except MalformedRowError as e:
            if not skip_invalid:
                raise
            logging.warning("Skipping malformed row: %s", e)

    return records


def load_data(source, skip_invalid: bool = False) -> list[WeatherRecord]:
    """
    Load weather records from a CSV file or an open text or binary stream.

    I/O failures are reported through the log and yield an empty list.
    A malformed row raises MalformedRowError unless skip_invalid is set.

    Args:
        source: A path (str or os.PathLike) or a readable stream. Binary
            streams are decoded as UTF-8.
        skip_invalid (bool, optional): Skip malformed rows instead of failing.

    Returns:
        list[WeatherRecord]: The loaded records, empty if the source
        could not be read.
    """
    if not isinstance(source, (str, os.PathLike)):
        try:
            return parse_lines(source, skip_invalid)
        except (OSError, UnicodeDecodeError) as e:
            logging.error("Error reading file: %s", e)
            return []

    path = pathlib.Path(source)
    if not path.is_file():
        logging.error("File not found: %s", source)
        return []

    try:
        with path.open("r", encoding="utf-8") as fh:
            records = parse_lines(fh, skip_invalid)
    except (OSError, UnicodeDecodeError) as e:
        logging.error("Error reading file: %s", e)
        return []

    logging.debug("Loaded %d records from %s", len(records), path)
    return records
