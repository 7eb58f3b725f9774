"""AssessmentService - full assessment computation from one snapshot."""

from typing import Optional

from ..core.value_objects.assessment_input import AssessmentInput
from ..core.value_objects.assessment_result import AssessmentResult
from .body_composition_service import BodyCompositionService
from .classification_service import ClassificationService
from .energy_expenditure_service import EnergyExpenditureService
from .pediatric_waist import pediatric_waist_reference
from .weight_based_calorie_service import WeightBasedCalorieService


class AssessmentService:
    """Compute every derived metric of an assessment.

    Data flows one way: the snapshot feeds the body composition
    resolver, whose dry weight feeds the energy and kcal/kg estimators;
    the classification service labels the numeric outputs. The service
    holds no state, so a result is a pure function of its input.
    """

    def __init__(
        self,
        body_composition: Optional[BodyCompositionService] = None,
        classification: Optional[ClassificationService] = None,
        energy: Optional[EnergyExpenditureService] = None,
        weight_based: Optional[WeightBasedCalorieService] = None,
    ) -> None:
        self._body_composition = body_composition or BodyCompositionService()
        self._classification = classification or ClassificationService()
        self._energy = energy or EnergyExpenditureService()
        self._weight_based = weight_based or WeightBasedCalorieService()

    def compute(self, data: AssessmentInput) -> AssessmentResult:
        """Compute the complete result for an input snapshot."""
        composition = self._body_composition.resolve(data)
        dry_weight = composition.dry_weight_kg

        bmi_current = self._classification.bmi(data.current_weight_kg, data.height_cm)
        bmi_selected = self._classification.bmi(
            data.selected_weight_kg, data.height_cm
        )

        energy = self._energy.calculate(
            gender=data.gender,
            actual_weight_kg=dry_weight,
            selected_weight_kg=data.selected_weight_kg,
            height_cm=data.height_cm,
            age_years=data.age_years,
            activity=data.activity_factor,
            deficit_kcal=data.calorie_deficit_kcal,
        )

        return AssessmentResult(
            input=data,
            body_composition=composition,
            bmi_current=bmi_current,
            bmi_selected=bmi_selected,
            waist=self._classification.classify_waist(data.gender, data.waist_cm),
            pediatric_waist=pediatric_waist_reference(
                data.gender, data.age_years, data.waist_cm
            ),
            energy=energy,
            method_1=self._weight_based.method_1(
                data.selected_weight_kg,
                self._classification.weight_status(bmi_selected),
            ),
            method_2=self._weight_based.method_2(
                dry_weight, data.selected_weight_kg
            ),
        )


_default_service = AssessmentService()


def compute_assessment(data: AssessmentInput) -> AssessmentResult:
    """Compute an assessment with the default calculators."""
    return _default_service.compute(data)
