"""AssessmentInput value object - normalized anthropometric snapshot."""

import math
from dataclasses import dataclass
from typing import Optional

from .activity_factor import ActivityFactor
from .change_duration import ChangeDuration
from .gender import Gender
from .pediatric_age import PediatricAge

_NON_NEGATIVE_FIELDS = (
    "age_years",
    "height_cm",
    "waist_cm",
    "current_weight_kg",
    "usual_weight_kg",
    "selected_weight_kg",
    "ascites_offset_kg",
    "edema_offset_kg",
)

# Upper bound for any numeric field; keeps every derived figure finite
MAX_MAGNITUDE = 1e6


@dataclass(frozen=True)
class AssessmentInput:
    """Immutable input snapshot for one assessment computation.

    Units are canonical (kg, cm, years). A numeric field left at 0 means
    "not provided"; the calculators guard against it instead of treating
    it as a physical zero. The defaults describe the blank calculator.

    Attributes:
        gender: Selects sex-specific coefficients
        age_years: Age in years
        height_cm: Standing height in centimeters
        waist_cm: Waist circumference in centimeters (0 = absent)
        current_weight_kg: Measured weight, fluid included
        usual_weight_kg: Usual weight before the change (0 = absent)
        selected_weight_kg: Clinician-chosen reference weight
        activity_factor: Physical activity multiplier
        change_duration: Period of the weight change
        ascites_offset_kg: Estimated ascitic fluid weight
        edema_offset_kg: Estimated edema fluid weight
        calorie_deficit_kcal: Deficit subtracted from TEE (negative adds)
        pediatric_age: Y/M/D breakdown for patients under 20, if known
    """

    gender: Gender = Gender.MALE
    age_years: float = 0.0
    height_cm: float = 0.0
    waist_cm: float = 0.0
    current_weight_kg: float = 0.0
    usual_weight_kg: float = 0.0
    selected_weight_kg: float = 0.0
    activity_factor: ActivityFactor = ActivityFactor.UNSET
    change_duration: ChangeDuration = ChangeDuration.UNSET
    ascites_offset_kg: float = 0.0
    edema_offset_kg: float = 0.0
    calorie_deficit_kcal: float = 0.0
    pediatric_age: Optional[PediatricAge] = None

    def __post_init__(self) -> None:
        """Validate measurement constraints.

        Raises:
            InvalidAssessmentInputError: If a value is negative, not finite
                or larger than MAX_MAGNITUDE
        """
        from ..exceptions.domain_errors import InvalidAssessmentInputError

        for name in _NON_NEGATIVE_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value) or not 0 <= value <= MAX_MAGNITUDE:
                raise InvalidAssessmentInputError(
                    f"{name} must be between 0 and {MAX_MAGNITUDE:g}, got {value}"
                )

        deficit = self.calorie_deficit_kcal
        if not math.isfinite(deficit) or abs(deficit) > MAX_MAGNITUDE:
            raise InvalidAssessmentInputError(
                f"calorie_deficit_kcal must be within +/-{MAX_MAGNITUDE:g}, "
                f"got {deficit}"
            )
