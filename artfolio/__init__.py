"""Artfolio: a portfolio gallery for a single artist."""

__version__ = "0.1.0"
