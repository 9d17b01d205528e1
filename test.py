"""
Run all tests in the project.
This script is designed to be run from the command line.
"""

import unittest
import sys


def run_all_tests():
    """
    Run all tests in the project.

    Discovers and runs all test cases in the 'test' directory.

    Returns:
        int: Exit code - 0 if all tests passed, 1 otherwise.
    """
    test_loader = unittest.defaultTestLoader

    test_suite = test_loader.discover("test", pattern="test_*.py")

    test_runner = unittest.TextTestRunner(verbosity=1)

    result = test_runner.run(test_suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
