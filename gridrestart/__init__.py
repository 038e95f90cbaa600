"""Grid restart engine: minute-by-minute dispatch after a total blackout."""

__version__ = "0.1.0"
