"""Command-line interface for tvguide."""
