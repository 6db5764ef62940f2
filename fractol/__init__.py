"""XPM image reading, colour names, and string, memory, list and formatting helpers."""

__version__ = "0.1.0"