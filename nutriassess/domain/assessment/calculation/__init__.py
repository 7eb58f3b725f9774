"""Calculation services for clinical assessment."""

from .age_service import AgeService
from .assessment_service import AssessmentService, compute_assessment
from .body_composition_service import BodyCompositionService
from .classification_service import ClassificationService
from .energy_expenditure_service import (
    EnergyExpenditureService,
    HarrisBenedictEquation,
    MifflinStJeorEquation,
)
from .input_normalizer import InputNormalizer, RawAssessmentInput
from .pediatric_waist import pediatric_waist_reference, waist_percentiles
from .weight_based_calorie_service import WeightBasedCalorieService

__all__ = [
    "AgeService",
    "AssessmentService",
    "BodyCompositionService",
    "ClassificationService",
    "EnergyExpenditureService",
    "HarrisBenedictEquation",
    "InputNormalizer",
    "MifflinStJeorEquation",
    "RawAssessmentInput",
    "WeightBasedCalorieService",
    "compute_assessment",
    "pediatric_waist_reference",
    "waist_percentiles",
]
