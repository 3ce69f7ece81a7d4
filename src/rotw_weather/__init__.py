"""Roots of the Wild village weather engine."""

__version__ = "0.1.0"
