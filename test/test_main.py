"""
Test cases for the main.py functions.
"""

import contextlib
import io
import os
import unittest
from unittest.mock import patch

from main import get_args, main


class TestGetArgs(unittest.TestCase):
    """Test cases for command line parsing."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Without flags the fixed resource, August and 30°C are used."""
        args = get_args([])

        self.assertEqual(args.file, "weatherdata.csv")
        self.assertEqual(args.month, 8)
        self.assertEqual(args.threshold, 30.0)
        self.assertFalse(args.skip_invalid)
        self.assertFalse(args.debug)

    @patch.dict(os.environ, {"WEATHER_DATA_FILE": "/data/other.csv"})
    def test_file_from_environment(self):
        self.assertEqual(get_args([]).file, "/data/other.csv")

    @patch.dict(os.environ, {"WEATHER_DATA_FILE": "/data/other.csv"})
    def test_file_flag_overrides_environment(self):
        self.assertEqual(get_args(["--file", "mine.csv"]).file, "mine.csv")

    def test_all_flags(self):
        args = get_args(
            [
                "--file",
                "mine.csv",
                "--month",
                "1",
                "--threshold",
                "-2.5",
                "--skip-invalid",
                "--debug",
            ]
        )

        self.assertEqual(args.month, 1)
        self.assertEqual(args.threshold, -2.5)
        self.assertTrue(args.skip_invalid)
        self.assertTrue(args.debug)

    def test_invalid_month(self):
        for month in ("0", "13"):
            with self.subTest(month=month):
                with contextlib.redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit):
                        get_args(["--month", month])


class TestMain(unittest.TestCase):
    """Test cases for the main function."""

    @patch.dict(os.environ, {}, clear=True)
    @patch("main.Analyzer")
    def test_main_runs_analyzer(self, mock_analyzer):
        """main builds an Analyzer from the arguments and runs it."""
        main([])

        mock_analyzer.assert_called_once_with(
            data_file="weatherdata.csv",
            month=8,
            threshold=30.0,
            debug=False,
            skip_invalid=False,
        )
        mock_analyzer.return_value.run.assert_called_once_with()

    @patch("main.Analyzer")
    def test_main_passes_flags(self, mock_analyzer):
        main(["--file", "x.csv", "--month", "2", "--skip-invalid"])

        kwargs = mock_analyzer.call_args.kwargs
        self.assertEqual(kwargs["data_file"], "x.csv")
        self.assertEqual(kwargs["month"], 2)
        self.assertTrue(kwargs["skip_invalid"])


if __name__ == "__main__":
    unittest.main()
