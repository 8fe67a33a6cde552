"""
Report breakdown renderer.
Renders grouped time report rows to an HTML fragment with Jinja2 for the
invoice renderer.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from vaops.domain.models.time_report import (
    ReportDisplayRow,
    TimeReport,
    format_duration,
    format_short_date,
)

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "time_report.html"


class ReportRenderer:
    """Loads and renders time report templates using Jinja2."""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.templates_dir = templates_dir or (Path(__file__).parent / "templates")

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for report templates."""

        def short_date(value):
            if isinstance(value, datetime):
                value = value.date()
            if isinstance(value, date):
                return format_short_date(value)
            return ""

        self.env.filters["duration"] = format_duration
        self.env.filters["short_date"] = short_date

    def render(self, report: TimeReport, rows: Sequence[ReportDisplayRow]) -> str:
        """Render the breakdown of one report."""
        template = self.env.get_template(TEMPLATE_NAME)
        html = template.render(report=report, rows=rows)
        logger.debug(f"Rendered time report {report.id} ({len(rows)} rows)")
        return html
