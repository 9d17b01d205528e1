"""
This file configures the logger for the analyzer.

Diagnostics are written to stderr so they never mix with the summary
printed on stdout.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """
    Formatter that wraps each message in the ANSI color of its level.

    Args:
        fmt (str): Format string passed to logging.Formatter.
        use_colors (bool): If False, messages are left uncolored.
    """

    COLORS = {
        "DEBUG": "\033[0;96m",  # Cyan
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str = None, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record):
        message = super().format(record)
        if not self.use_colors:
            return message

        log_color = self.COLORS.get(record.levelname, self.RESET)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False, stream=None) -> logging.Handler:
    """
    Configures the root logger with a single colored stream handler.

    Args:
        debug (bool, optional): If True, sets logging level to DEBUG;
                               otherwise sets it to INFO. Defaults to False.
        stream (optional): Stream the handler writes to. Defaults to sys.stderr.

    Returns:
        logging.Handler: The handler that was installed.
    """
    stream = stream if stream is not None else sys.stderr
    logger = logging.getLogger()

    # Remove any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    use_colors = hasattr(stream, "isatty") and stream.isatty()
    handler.setFormatter(
        ColoredFormatter("[%(asctime)s] %(levelname)s: %(message)s", use_colors)
    )

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)

    return handler
