"""Cortex: AI-assisted personal knowledge capture."""

__version__ = "0.1.0"
