"""This module stores the model for the analyzer package."""

from .analyzer import Analyzer

__all__ = ["builders", "loader", "logger", "schema", "statistics", "Analyzer"]
