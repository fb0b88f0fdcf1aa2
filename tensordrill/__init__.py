"""Guided tensor exercises on numpy, with timing metrics and backend reporting."""

__version__ = "0.1.0"