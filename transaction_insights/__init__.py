"""Transaction Insights: seeded product transactions with monthly analytics."""

__version__ = "1.0.0"
