"""Aggregating search proxy for stock photo and video providers."""

__version__ = "1.0.0"
