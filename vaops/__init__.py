"""
VA operations portal backend: time reports and invoice linkage.
"""

__version__ = "1.0.0"
