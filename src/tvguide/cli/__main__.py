#!/usr/bin/env python3
"""
CLI entry point for tvguide.cli module.

This allows running: python -m tvguide.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
