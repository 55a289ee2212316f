"""Solutions to puzzles of a 2024 daily programming puzzle calendar, one module per day."""

__version__ = "0.1.0"