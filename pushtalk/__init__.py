"""Signal messaging, a two-stack sorter and small character and string helpers."""

__version__ = "0.1.0"