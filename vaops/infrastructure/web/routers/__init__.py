"""
API routers.
"""

from . import clients, invoices, time_reports

__all__ = ["clients", "invoices", "time_reports"]
