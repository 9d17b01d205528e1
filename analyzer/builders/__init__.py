"""
Builders module.
"""

from .summary_builder import SummaryBuilder, format_summary, format_threshold

__all__ = [
    "SummaryBuilder",
    "format_summary",
    "format_threshold",
]
