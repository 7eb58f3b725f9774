"""Nutritional energy and body-composition assessment engine."""

__version__ = "0.1.0"
