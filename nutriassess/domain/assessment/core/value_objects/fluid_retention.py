"""Fluid retention degrees - weight offsets subtracted to get dry weight."""

from enum import Enum


class AscitesDegree(str, Enum):
    """Clinical ascites grade and its estimated fluid weight."""

    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SEVERE = "severe"

    def offset_kg(self) -> float:
        """Estimated ascitic fluid weight in kg."""
        offsets = {
            AscitesDegree.NONE: 0.0,
            AscitesDegree.MINIMAL: 2.2,
            AscitesDegree.MODERATE: 6.0,
            AscitesDegree.SEVERE: 14.0,
        }
        return offsets[self]


class EdemaDegree(str, Enum):
    """Peripheral edema grade and its estimated fluid weight."""

    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SEVERE = "severe"

    def offset_kg(self) -> float:
        """Estimated edema fluid weight in kg."""
        offsets = {
            EdemaDegree.NONE: 0.0,
            EdemaDegree.MINIMAL: 1.0,
            EdemaDegree.MODERATE: 5.0,
            EdemaDegree.SEVERE: 10.0,
        }
        return offsets[self]
