"""boil — a personal registry of scripts and projects."""

__version__ = "0.3.0"
