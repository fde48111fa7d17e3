"""Command-line currency converter with a file-backed rate cache."""

__version__ = "0.1.0"