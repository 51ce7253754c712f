"""Station Conquest - izakaya check-ins around transit stations."""

__version__ = "0.1.0"
