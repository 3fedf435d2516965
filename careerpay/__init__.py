"""Career Pay - Pay, take-home and salary conversion calculators."""

__version__ = "0.3.0"
