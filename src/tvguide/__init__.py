"""
tvguide - regional TV guide dataset builder and grid engine.

Converts a broadcast-slot spreadsheet into a validated guide dataset and turns
that dataset into a day-by-time grid for a chosen region and timezone.
"""

__version__ = "0.1.0"
