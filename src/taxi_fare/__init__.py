"""Tunisian taxi fare estimator."""

__version__ = "1.0.0"
