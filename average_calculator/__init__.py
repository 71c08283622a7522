"""Sliding-window average calculator service."""

__version__ = "0.1.0"
