"""reignstat — statistics over historical-ruler records."""

__version__ = "0.1.0"
