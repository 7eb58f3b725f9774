"""AssessmentResult value object - every derived metric of one snapshot."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .assessment_input import AssessmentInput
from .body_composition import BodyComposition
from .classification import (
    BMIAssessment,
    PediatricWaistReference,
    WaistAssessment,
)
from .energy import (
    ActivityTierComparison,
    EquationResult,
    WeightStatusCalorieMatrix,
)


@dataclass(frozen=True)
class AssessmentResult:
    """Complete, never partial, output of compute_assessment.

    The methods are parallel estimates; no single "best" value is chosen.

    Attributes:
        input: Snapshot the result was computed from
        body_composition: Dry weight, weight trend, IBW/ABW figures
        bmi_current: BMI on the measured current weight
        bmi_selected: BMI on the clinician-selected weight
        waist: Adult waist circumference band
        pediatric_waist: Percentile reference for ages 2-18, else None
        energy: Method 3, one EquationResult per BMR equation
        method_1: kcal/kg by weight status against the selected weight
        method_2: kcal/kg by activity tier for actual and selected weight
    """

    input: AssessmentInput
    body_composition: BodyComposition
    bmi_current: BMIAssessment
    bmi_selected: BMIAssessment
    waist: WaistAssessment
    pediatric_waist: Optional[PediatricWaistReference]
    energy: Tuple[EquationResult, ...]
    method_1: WeightStatusCalorieMatrix
    method_2: ActivityTierComparison

    def equation(self, name: str) -> EquationResult:
        """Get the estimates of a BMR equation by name.

        Raises:
            KeyError: If no equation with that name was computed
        """
        for result in self.energy:
            if result.equation == name:
                return result
        raise KeyError(name)
