"""
HTML rendering of time report breakdowns.
"""

from .report_renderer import ReportRenderer

__all__ = ["ReportRenderer"]
