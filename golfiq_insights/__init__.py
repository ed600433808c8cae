"""Deterministic post-round insight generation for GolfIQ."""

__version__ = "0.1.0"
