"""WarTycoon: turn-based territorial strategy rules engine."""

__version__ = "0.1.0"
