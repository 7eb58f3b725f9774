"""Energy value objects - BMR/TEE estimates and kcal/kg cross-checks."""

from dataclasses import dataclass
from typing import Optional

from .classification import WeightStatus


@dataclass(frozen=True)
class EnergyEstimate:
    """BMR-based estimate for one weight basis, in kcal/day.

    Attributes:
        bmr_kcal: Basal metabolic rate
        tee_kcal: BMR x activity factor
        estimated_kcal: TEE minus the calorie deficit
    """

    bmr_kcal: float
    tee_kcal: float
    estimated_kcal: float


@dataclass(frozen=True)
class EquationResult:
    """Estimates of one BMR equation for both weight bases."""

    equation: str
    actual: EnergyEstimate
    selected: EnergyEstimate


@dataclass(frozen=True)
class StatusCalorieRow:
    """Method 1 row: kcal/day per activity tier for one weight status."""

    sedentary_kcal: float
    moderate_kcal: float
    heavy_kcal: float


@dataclass(frozen=True)
class WeightStatusCalorieMatrix:
    """Method 1: 3x3 kcal/kg lookup against the selected weight.

    Attributes:
        underweight: Row for underweight patients
        normal: Row for normal-weight patients
        overweight: Row for overweight patients
        applicable_status: Status from the BMI classification, if any
    """

    underweight: StatusCalorieRow
    normal: StatusCalorieRow
    overweight: StatusCalorieRow
    applicable_status: Optional[WeightStatus]

    def row(self, status: WeightStatus) -> StatusCalorieRow:
        return {
            WeightStatus.UNDERWEIGHT: self.underweight,
            WeightStatus.NORMAL: self.normal,
            WeightStatus.OVERWEIGHT: self.overweight,
        }[status]

    def applicable(self) -> Optional[StatusCalorieRow]:
        """Row matching the classified weight status, if known."""
        if self.applicable_status is None:
            return None
        return self.row(self.applicable_status)


@dataclass(frozen=True)
class ActivityTierCalories:
    """Method 2: kcal/day per activity tier for one weight."""

    sedentary_kcal: float
    moderate_kcal: float
    moderate_high_kcal: float
    active_kcal: float


@dataclass(frozen=True)
class ActivityTierComparison:
    """Method 2 for the actual (dry) and the selected weight."""

    actual: ActivityTierCalories
    selected: ActivityTierCalories
