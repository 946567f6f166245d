"""Terminal system-information banner."""

__version__ = "0.1.0"
