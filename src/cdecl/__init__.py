"""Pronounce C declarations in English."""

__version__ = "0.1.0"
