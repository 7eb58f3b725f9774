"""Ports for the assessment domain."""

from .calculators import IBMREquation

__all__ = ["IBMREquation"]
