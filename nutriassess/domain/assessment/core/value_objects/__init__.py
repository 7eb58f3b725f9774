"""Value objects for the assessment domain."""

from .activity_factor import ActivityFactor
from .assessment_input import AssessmentInput
from .assessment_result import AssessmentResult
from .body_composition import (
    BodyComposition,
    IBWProtocol,
    IBWSelection,
    IdealWeightEstimate,
    ProtocolRecommendation,
    WeightLossAssessment,
    WeightLossSeverity,
)
from .change_duration import ChangeDuration
from .classification import (
    BMIAssessment,
    BMICategory,
    PediatricWaistReference,
    WaistAssessment,
    WaistPercentiles,
    WaistRisk,
    WeightStatus,
)
from .energy import (
    ActivityTierCalories,
    ActivityTierComparison,
    EnergyEstimate,
    EquationResult,
    StatusCalorieRow,
    WeightStatusCalorieMatrix,
)
from .fluid_retention import AscitesDegree, EdemaDegree
from .gender import Gender
from .pediatric_age import PediatricAge

__all__ = [
    "ActivityFactor",
    "ActivityTierCalories",
    "ActivityTierComparison",
    "AscitesDegree",
    "AssessmentInput",
    "AssessmentResult",
    "BMIAssessment",
    "BMICategory",
    "BodyComposition",
    "ChangeDuration",
    "EdemaDegree",
    "EnergyEstimate",
    "EquationResult",
    "Gender",
    "IBWProtocol",
    "IBWSelection",
    "IdealWeightEstimate",
    "PediatricAge",
    "PediatricWaistReference",
    "ProtocolRecommendation",
    "StatusCalorieRow",
    "WaistAssessment",
    "WaistPercentiles",
    "WaistRisk",
    "WeightLossAssessment",
    "WeightLossSeverity",
    "WeightStatus",
    "WeightStatusCalorieMatrix",
]
