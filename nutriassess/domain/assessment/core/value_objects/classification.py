"""Classification value objects - BMI, waist and pediatric references."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .gender import Gender


class WeightStatus(str, Enum):
    """Coarse weight status used by the kcal/kg matrix."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"


class BMICategory(str, Enum):
    """BMI bands, protein-energy malnutrition grades through obesity."""

    PEM_III = "PEM III"
    PEM_II = "PEM II"
    PEM_I = "PEM I"
    NORMAL = "Normal Weight"
    OVERWEIGHT = "Overweight"
    OBESITY_I = "Obesity I"
    OBESITY_II = "Obesity II"
    EXTREME_OBESITY = "Extreme Obesity"

    def weight_status(self) -> WeightStatus:
        """Map the band onto the coarse weight status.

        Example:
            >>> BMICategory.PEM_II.weight_status()
            <WeightStatus.UNDERWEIGHT: 'underweight'>
        """
        if self in (BMICategory.PEM_III, BMICategory.PEM_II, BMICategory.PEM_I):
            return WeightStatus.UNDERWEIGHT
        if self is BMICategory.NORMAL:
            return WeightStatus.NORMAL
        return WeightStatus.OVERWEIGHT


@dataclass(frozen=True)
class BMIAssessment:
    """BMI value with its band; value 0 and no band when not computable."""

    value: float
    category: Optional[BMICategory]

    @property
    def label(self) -> str:
        return self.category.value if self.category else ""


class WaistRisk(str, Enum):
    """Adult waist circumference risk band."""

    BELOW_NORMAL = "below_normal"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


@dataclass(frozen=True)
class WaistAssessment:
    """Adult waist classification; blank when no waist was measured."""

    waist_cm: float
    risk: Optional[WaistRisk]
    label: str


@dataclass(frozen=True)
class WaistPercentiles:
    """10th/50th/90th waist circumference percentiles in cm."""

    p10: float
    p50: float
    p90: float


@dataclass(frozen=True)
class PediatricWaistReference:
    """Percentile reference for one child, for clinician comparison.

    Attributes:
        gender: Reference table used
        age_years: Integer age used as lookup key
        percentiles: Reference percentiles for that age
        waist_cm: Measured waist (0 when absent)
        elevated: Waist above the 90th percentile (cardiometabolic risk)
    """

    gender: Gender
    age_years: int
    percentiles: WaistPercentiles
    waist_cm: float
    elevated: bool
