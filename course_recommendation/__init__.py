"""Assessment-driven course recommendation engine."""

__version__ = "1.0.0"
