"""ClassificationService - BMI and waist circumference bands."""

import math
from typing import List, Optional, Tuple

from ..core.value_objects.classification import (
    BMIAssessment,
    BMICategory,
    WaistAssessment,
    WaistRisk,
    WeightStatus,
)
from ..core.value_objects.gender import Gender

# Upper bounds (exclusive) of each BMI band, in ascending order
_BMI_BANDS: List[Tuple[float, BMICategory]] = [
    (16.0, BMICategory.PEM_III),
    (17.0, BMICategory.PEM_II),
    (18.5, BMICategory.PEM_I),
    (25.0, BMICategory.NORMAL),
    (30.0, BMICategory.OVERWEIGHT),
    (35.0, BMICategory.OBESITY_I),
    (40.0, BMICategory.OBESITY_II),
]

# (below-normal bound, normal upper bound, overweight upper bound) in cm
_WAIST_BANDS = {
    Gender.MALE: (78.0, 94.0, 102.0),
    Gender.FEMALE: (64.0, 80.0, 88.0),
}


class ClassificationService:
    """Map numeric outputs onto ordered clinical categories.

    BMI bands (lower bound inclusive, upper exclusive):
        <16 PEM III, <17 PEM II, <18.5 PEM I, <25 Normal Weight,
        <30 Overweight, <35 Obesity I, <40 Obesity II, else Extreme Obesity

    Adult waist bands (cm):
        Men:   <78 below normal, 78-94 normal, >94-102 overweight, >102 obese
        Women: <64 below normal, 64-80 normal, >80-88 overweight, >88 obese
    """

    def bmi(self, weight_kg: float, height_cm: float) -> BMIAssessment:
        """Calculate and classify BMI.

        Returns a zero, unlabelled assessment when weight or height is
        missing, or when the height is too small for a finite BMI.

        Example:
            >>> ClassificationService().bmi(60.0, 180.0).label
            'Normal Weight'
        """
        if weight_kg <= 0 or height_cm <= 0:
            return BMIAssessment(value=0.0, category=None)
        height_m = height_cm / 100
        denominator = height_m * height_m
        if denominator <= 0 or not math.isfinite(weight_kg / denominator):
            return BMIAssessment(value=0.0, category=None)
        value = weight_kg / denominator
        return BMIAssessment(value=value, category=self.classify_bmi(value))

    def classify_bmi(self, bmi: float) -> BMICategory:
        for upper, category in _BMI_BANDS:
            if bmi < upper:
                return category
        return BMICategory.EXTREME_OBESITY

    def weight_status(self, bmi: BMIAssessment) -> Optional[WeightStatus]:
        """Weight status for the kcal/kg matrix, None when unclassified."""
        if bmi.category is None:
            return None
        return bmi.category.weight_status()

    def classify_waist(self, gender: Gender, waist_cm: float) -> WaistAssessment:
        """Classify an adult waist circumference.

        Example:
            >>> ClassificationService().classify_waist(Gender.MALE, 95).label
            'Overweight (94-102)'
        """
        if waist_cm <= 0:
            return WaistAssessment(waist_cm=waist_cm, risk=None, label="")

        low, normal_max, overweight_max = _WAIST_BANDS[gender]
        if waist_cm < low:
            risk, label = WaistRisk.BELOW_NORMAL, "Below normal"
        elif waist_cm <= normal_max:
            risk, label = WaistRisk.NORMAL, f"Normal range ({low:g}-{normal_max:g})"
        elif waist_cm <= overweight_max:
            risk, label = (
                WaistRisk.OVERWEIGHT,
                f"Overweight ({normal_max:g}-{overweight_max:g})",
            )
        else:
            risk, label = WaistRisk.OBESE, f"Obese (more than {overweight_max:g})"

        return WaistAssessment(waist_cm=waist_cm, risk=risk, label=label)
