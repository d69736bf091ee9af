"""Speech record service with multi-criteria search."""

__version__ = "1.0.0"
