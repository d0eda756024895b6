"""Challenge Tracker: staged betting challenges with compound-growth tracking."""

__version__ = "0.1.0"

__all__ = ["__version__"]
