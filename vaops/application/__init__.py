"""
Application layer: use cases and DTOs for time reporting.
"""
