"""Building blocks for a terminal log viewer: histories, options, histogram model and text helpers."""

__version__ = "0.1.0"