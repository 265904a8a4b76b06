"""Discord administration bot for the file host backend."""

__version__ = "1.0.0"
