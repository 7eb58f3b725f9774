"""GraphQL types for the assessment calculator.

Inputs mirror the calculator form; every field is optional so a partly
filled form still yields a (partly blank) result.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

import strawberry

__all__ = [
    # Enums
    "GenderEnum",
    "ActivityFactorEnum",
    "ChangeDurationEnum",
    "FluidDegreeEnum",
    # Input types
    "AssessmentRequestInput",
    # Output types
    "PediatricAgeType",
    "WeightLossType",
    "IdealWeightType",
    "IBWProtocolType",
    "BodyCompositionType",
    "BMIType",
    "WaistType",
    "WaistPercentilesType",
    "PediatricWaistType",
    "EnergyEstimateType",
    "EquationResultType",
    "StatusCalorieRowType",
    "WeightStatusMatrixType",
    "ActivityTierType",
    "ActivityTierComparisonType",
    "DisplayValueType",
    "AssessmentResultType",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    """Biological sex for formula coefficients."""

    MALE = "male"
    FEMALE = "female"


@strawberry.enum
class ActivityFactorEnum(str, Enum):
    """Activity multiplier applied to BMR."""

    UNSET = "unset"  # 0
    MILD = "mild"  # 1.375
    SEDENTARY = "sedentary"  # 1.5
    MODERATE = "moderate"  # 1.55
    VERY_ACTIVE = "very_active"  # 1.725
    HEAVY_ACTIVE = "heavy_active"  # 1.9


@strawberry.enum
class ChangeDurationEnum(str, Enum):
    """Period of the recorded weight change."""

    UNSET = "unset"
    WEEK = "week"
    ONE_MONTH = "one_month"
    THREE_MONTHS = "three_months"
    SIX_MONTHS = "six_months"
    ONE_YEAR = "one_year"


@strawberry.enum
class FluidDegreeEnum(str, Enum):
    """Ascites / edema grade."""

    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SEVERE = "severe"


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class AssessmentRequestInput:
    """Calculator form fields.

    Fluid offsets can be given either as a grade or as kilograms; the
    kilogram value wins when both are set.
    """

    gender: Optional[GenderEnum] = None
    age_years: Optional[float] = None
    birth_date: Optional[date] = None
    report_date: Optional[date] = None
    height_cm: Optional[float] = None
    waist_cm: Optional[float] = None
    current_weight_kg: Optional[float] = None
    usual_weight_kg: Optional[float] = None
    selected_weight_kg: Optional[float] = None
    activity_factor: Optional[ActivityFactorEnum] = None
    change_duration: Optional[ChangeDurationEnum] = None
    ascites: Optional[FluidDegreeEnum] = None
    ascites_offset_kg: Optional[float] = None
    edema: Optional[FluidDegreeEnum] = None
    edema_offset_kg: Optional[float] = None
    calorie_deficit_kcal: Optional[float] = None


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class PediatricAgeType:
    """Calendar age breakdown, kept under 20 years."""

    years: int
    months: int
    days: int


@strawberry.type
class WeightLossType:
    """Percent loss from usual weight and its malnutrition severity."""

    percent: float
    severity: str  # blank when none
    has_usual_weight: bool


@strawberry.type
class IdealWeightType:
    """One IBW formula with its adjusted weight and selection rule."""

    ideal_kg: float
    adjusted_kg: float
    deviation_percent: Optional[float]  # null without a dry weight
    selection: str  # "Use IBW" / "Use ABW" / blank


@strawberry.type
class IBWProtocolType:
    """30% rule on the accurate IBW."""

    margin_kg: float
    threshold_kg: float
    is_high_obesity: bool
    recommended_weight_kg: float
    recommendation: str


@strawberry.type
class BodyCompositionType:
    dry_weight_kg: float
    weight_loss: WeightLossType
    simple: IdealWeightType
    accurate: IdealWeightType
    protocol: IBWProtocolType


@strawberry.type
class BMIType:
    """BMI value (0 when not computable) and band label."""

    value: float
    category: str


@strawberry.type
class WaistType:
    waist_cm: float
    risk: Optional[str]
    label: str


@strawberry.type
class WaistPercentilesType:
    """Pediatric waist percentiles in cm."""

    p10: float
    p50: float
    p90: float


@strawberry.type
class PediatricWaistType:
    gender: GenderEnum
    age_years: int
    percentiles: WaistPercentilesType
    waist_cm: float
    elevated: bool


@strawberry.type
class EnergyEstimateType:
    """BMR, TEE and calorie target in kcal/day."""

    bmr_kcal: float
    tee_kcal: float
    estimated_kcal: float


@strawberry.type
class EquationResultType:
    equation: str
    actual: EnergyEstimateType
    selected: EnergyEstimateType


@strawberry.type
class StatusCalorieRowType:
    sedentary_kcal: float
    moderate_kcal: float
    heavy_kcal: float


@strawberry.type
class WeightStatusMatrixType:
    """Method 1 kcal/kg matrix against the selected weight."""

    underweight: StatusCalorieRowType
    normal: StatusCalorieRowType
    overweight: StatusCalorieRowType
    applicable_status: Optional[str]


@strawberry.type
class ActivityTierType:
    sedentary_kcal: float
    moderate_kcal: float
    moderate_high_kcal: float
    active_kcal: float


@strawberry.type
class ActivityTierComparisonType:
    """Method 2 for actual and selected weight."""

    actual: ActivityTierType
    selected: ActivityTierType


@strawberry.type
class DisplayValueType:
    """Preformatted display string for one metric."""

    key: str
    value: str


@strawberry.type
class AssessmentResultType:
    """Complete assessment; every method is reported side by side."""

    age_years: float  # age the BMR equations used
    pediatric_age: Optional[PediatricAgeType]
    activity_label: str
    body_composition: BodyCompositionType
    bmi_current: BMIType
    bmi_selected: BMIType
    waist: WaistType
    pediatric_waist: Optional[PediatricWaistType]
    energy: List[EquationResultType]
    method_1: WeightStatusMatrixType
    method_2: ActivityTierComparisonType
    display: List[DisplayValueType]
