"""Title IDs, title metadata contents, content selectors and stream helpers for Nintendo formats."""

__version__ = "0.1.0"