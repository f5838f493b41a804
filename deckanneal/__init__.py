"""Simulated-annealing deck ordering, temperature tuning and a small CSV table reader."""

__version__ = "0.1.0"
__all__ = ["annealing", "csvfile", "tuning"]