"""Player records API with date-indexed performance series."""

__version__ = "0.1.0"
