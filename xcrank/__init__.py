"""Rank DHV-XC paragliding flights of a day on the console."""

__version__ = "0.1.0"
