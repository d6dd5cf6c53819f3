"""taskpick - select and order tasks under a time budget."""

__version__ = "0.1.0"
