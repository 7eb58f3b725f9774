"""Query resolvers for the assessment calculator.

- compute: Run the full assessment for a calculator form
- pediatricWaistReference: Percentile lookup for a child's age
"""

from typing import Any, Dict, Optional

import strawberry
from strawberry.types import Info

from nutriassess.application.assessment.formatters import format_assessment
from nutriassess.application.assessment.queries.compute_assessment import (
    ComputeAssessmentQuery,
    ComputeAssessmentQueryHandler,
)
from nutriassess.domain.assessment.calculation.pediatric_waist import (
    pediatric_waist_reference,
)
from nutriassess.domain.assessment.core.value_objects import (
    AssessmentResult,
    BodyComposition,
    EnergyEstimate,
    Gender,
    IdealWeightEstimate,
    StatusCalorieRow,
    ActivityTierCalories,
)
from nutriassess.schema.types_assessment import (
    ActivityTierComparisonType,
    ActivityTierType,
    AssessmentRequestInput,
    AssessmentResultType,
    BMIType,
    BodyCompositionType,
    DisplayValueType,
    EnergyEstimateType,
    EquationResultType,
    GenderEnum,
    IBWProtocolType,
    IdealWeightType,
    PediatricAgeType,
    PediatricWaistType,
    StatusCalorieRowType,
    WaistPercentilesType,
    WaistType,
    WeightLossType,
    WeightStatusMatrixType,
)


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_input_to_fields(data: AssessmentRequestInput) -> Dict[str, Any]:
    """Map a GraphQL input onto raw normalizer fields (unset ones omitted)."""
    fields: Dict[str, Any] = {
        "gender": data.gender.value if data.gender else None,
        "age_years": data.age_years,
        "birth_date": data.birth_date,
        "report_date": data.report_date,
        "height_cm": data.height_cm,
        "waist_cm": data.waist_cm,
        "current_weight_kg": data.current_weight_kg,
        "usual_weight_kg": data.usual_weight_kg,
        "selected_weight_kg": data.selected_weight_kg,
        "activity_factor": data.activity_factor.value if data.activity_factor else None,
        "change_duration": data.change_duration.value if data.change_duration else None,
        "calorie_deficit_kcal": data.calorie_deficit_kcal,
    }

    if data.ascites_offset_kg is not None:
        fields["ascites_offset_kg"] = data.ascites_offset_kg
    elif data.ascites is not None:
        fields["ascites_offset_kg"] = data.ascites.value

    if data.edema_offset_kg is not None:
        fields["edema_offset_kg"] = data.edema_offset_kg
    elif data.edema is not None:
        fields["edema_offset_kg"] = data.edema.value

    return {key: value for key, value in fields.items() if value is not None}


def _map_ideal_weight(estimate: IdealWeightEstimate) -> IdealWeightType:
    return IdealWeightType(
        ideal_kg=estimate.ideal_kg,
        adjusted_kg=estimate.adjusted_kg,
        deviation_percent=estimate.deviation_percent,
        selection=estimate.selection_label,
    )


def _map_body_composition(composition: BodyComposition) -> BodyCompositionType:
    protocol = composition.protocol
    return BodyCompositionType(
        dry_weight_kg=composition.dry_weight_kg,
        weight_loss=WeightLossType(
            percent=composition.weight_loss.percent,
            severity=composition.weight_loss.label,
            has_usual_weight=composition.weight_loss.has_usual_weight,
        ),
        simple=_map_ideal_weight(composition.simple),
        accurate=_map_ideal_weight(composition.accurate),
        protocol=IBWProtocolType(
            margin_kg=protocol.margin_kg,
            threshold_kg=protocol.threshold_kg,
            is_high_obesity=protocol.is_high_obesity,
            recommended_weight_kg=protocol.recommended_weight_kg,
            recommendation=protocol.recommendation.value,
        ),
    )


def _map_energy(estimate: EnergyEstimate) -> EnergyEstimateType:
    return EnergyEstimateType(
        bmr_kcal=estimate.bmr_kcal,
        tee_kcal=estimate.tee_kcal,
        estimated_kcal=estimate.estimated_kcal,
    )


def _map_status_row(row: StatusCalorieRow) -> StatusCalorieRowType:
    return StatusCalorieRowType(
        sedentary_kcal=row.sedentary_kcal,
        moderate_kcal=row.moderate_kcal,
        heavy_kcal=row.heavy_kcal,
    )


def _map_tiers(tiers: ActivityTierCalories) -> ActivityTierType:
    return ActivityTierType(
        sedentary_kcal=tiers.sedentary_kcal,
        moderate_kcal=tiers.moderate_kcal,
        moderate_high_kcal=tiers.moderate_high_kcal,
        active_kcal=tiers.active_kcal,
    )


def map_domain_result_to_graphql(result: AssessmentResult) -> AssessmentResultType:
    """Map domain AssessmentResult to GraphQL AssessmentResultType."""
    pediatric = None
    if result.pediatric_waist is not None:
        ref = result.pediatric_waist
        pediatric = PediatricWaistType(
            gender=GenderEnum(ref.gender.value),
            age_years=ref.age_years,
            percentiles=WaistPercentilesType(
                p10=ref.percentiles.p10,
                p50=ref.percentiles.p50,
                p90=ref.percentiles.p90,
            ),
            waist_cm=ref.waist_cm,
            elevated=ref.elevated,
        )

    pediatric_age = None
    if result.input.pediatric_age is not None:
        age = result.input.pediatric_age
        pediatric_age = PediatricAgeType(
            years=age.years, months=age.months, days=age.days
        )

    method_1 = result.method_1
    return AssessmentResultType(
        age_years=result.input.age_years,
        pediatric_age=pediatric_age,
        activity_label=result.input.activity_factor.description(),
        body_composition=_map_body_composition(result.body_composition),
        bmi_current=BMIType(
            value=result.bmi_current.value, category=result.bmi_current.label
        ),
        bmi_selected=BMIType(
            value=result.bmi_selected.value, category=result.bmi_selected.label
        ),
        waist=WaistType(
            waist_cm=result.waist.waist_cm,
            risk=result.waist.risk.value if result.waist.risk else None,
            label=result.waist.label,
        ),
        pediatric_waist=pediatric,
        energy=[
            EquationResultType(
                equation=equation.equation,
                actual=_map_energy(equation.actual),
                selected=_map_energy(equation.selected),
            )
            for equation in result.energy
        ],
        method_1=WeightStatusMatrixType(
            underweight=_map_status_row(method_1.underweight),
            normal=_map_status_row(method_1.normal),
            overweight=_map_status_row(method_1.overweight),
            applicable_status=(
                method_1.applicable_status.value
                if method_1.applicable_status
                else None
            ),
        ),
        method_2=ActivityTierComparisonType(
            actual=_map_tiers(result.method_2.actual),
            selected=_map_tiers(result.method_2.selected),
        ),
        display=[
            DisplayValueType(key=key, value=value)
            for key, value in format_assessment(result).items()
        ],
    )


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class AssessmentQueries:
    """Stateless assessment calculator queries."""

    @strawberry.field(description="Compute every assessment metric for a form")  # type: ignore[misc]
    def compute(
        self, info: Info, input: AssessmentRequestInput
    ) -> AssessmentResultType:
        """Compute the assessment.

        Example:
            query {
              assessment {
                compute(input: {heightCm: 180, currentWeightKg: 60}) {
                  bmiCurrent { value category }
                }
              }
            }
        """
        context = info.context
        handler: Optional[ComputeAssessmentQueryHandler] = (
            context.get("assessment_handler") if context is not None else None
        )
        if handler is None:
            handler = ComputeAssessmentQueryHandler()

        query = ComputeAssessmentQuery(
            fields=map_input_to_fields(input),
            request_id=context.get("request_id") if context is not None else None,
        )
        result = handler.handle(query)
        return map_domain_result_to_graphql(result)

    @strawberry.field(description="Pediatric waist percentiles for ages 2-18")  # type: ignore[misc]
    def pediatric_waist_reference(
        self, gender: GenderEnum, age_years: float
    ) -> Optional[WaistPercentilesType]:
        reference = pediatric_waist_reference(Gender(gender.value), age_years)
        if reference is None:
            return None
        return WaistPercentilesType(
            p10=reference.percentiles.p10,
            p50=reference.percentiles.p50,
            p90=reference.percentiles.p90,
        )
