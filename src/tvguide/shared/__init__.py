"""Shared types and constants used across the domain, runtime and CLI layers."""
