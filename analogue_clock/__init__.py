"""Analogue clock with continuously rotating hands."""

__version__ = "0.1.0"
