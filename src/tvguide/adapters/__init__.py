"""
Adapters at the edge of the system.

Spreadsheet reading on the build side, persisted-document loading on the
query side.
"""
