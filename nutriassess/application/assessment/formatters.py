"""Display formatting for assessment results.

Renders numbers the way the calculator shows them: two decimals for
weights, BMI and percentages, whole kcal for energy values, blanks
instead of invalid numbers.
"""

from typing import Dict, Optional

from nutriassess.domain.assessment.core.value_objects.assessment_input import (
    AssessmentInput,
)
from nutriassess.domain.assessment.core.value_objects.assessment_result import (
    AssessmentResult,
)
from nutriassess.domain.assessment.core.value_objects.body_composition import (
    IdealWeightEstimate,
)


def format_kg(value: float) -> str:
    return f"{value:.2f} kg"


def format_kcal(value: float) -> str:
    return f"{value:.0f} Kcal"


def format_bmi(value: float) -> str:
    """BMI with unit, or '-' when it could not be computed."""
    return f"{value:.2f} kg/m²" if value > 0 else "-"


def format_age(data: AssessmentInput) -> str:
    """Y/M/D breakdown for children when known, whole years otherwise."""
    if data.pediatric_age is not None:
        return str(data.pediatric_age)
    return f"{data.age_years:g} years"


def format_deviation(estimate: IdealWeightEstimate) -> str:
    """'12.34 % (Diff) Use IBW', or blank without a dry weight."""
    deviation: Optional[float] = estimate.deviation_percent
    if deviation is None:
        return ""
    return f"{deviation:.2f} % (Diff) {estimate.selection_label}"


def format_assessment(result: AssessmentResult) -> Dict[str, str]:
    """Flatten a result into display strings keyed by metric name."""
    composition = result.body_composition
    loss = composition.weight_loss

    display: Dict[str, str] = {
        "age": format_age(result.input),
        "activity": result.input.activity_factor.description(),
        "weight_loss": f"{loss.percent:.2f} %" if loss.has_usual_weight else "0 %",
        "weight_loss_ref": loss.label,
        "dry_weight": format_kg(composition.dry_weight_kg),
        "waist": f"{result.waist.waist_cm:g} cm",
        "waist_ref": result.waist.label,
        "bmi": format_bmi(result.bmi_current.value),
        "bmi_ref": result.bmi_current.label,
        "bmi_selected": format_bmi(result.bmi_selected.value),
        "bmi_selected_ref": result.bmi_selected.label,
        "ibw": format_kg(composition.simple.ideal_kg),
        "ibw_diff": format_deviation(composition.simple),
        "abw": format_kg(composition.simple.adjusted_kg),
        "ibw_2": format_kg(composition.accurate.ideal_kg),
        "ibw_2_diff": format_deviation(composition.accurate),
        "abw_2": format_kg(composition.accurate.adjusted_kg),
        "protocol_threshold": format_kg(composition.protocol.threshold_kg),
        "protocol_weight": format_kg(composition.protocol.recommended_weight_kg),
        "protocol_ref": composition.protocol.recommendation.value,
    }

    method_1 = result.method_1
    for status, row in (
        ("under", method_1.underweight),
        ("norm", method_1.normal),
        ("over", method_1.overweight),
    ):
        display[f"{status}_sed_m1"] = format_kcal(row.sedentary_kcal)
        display[f"{status}_norm_m1"] = format_kcal(row.moderate_kcal)
        display[f"{status}_heavy_m1"] = format_kcal(row.heavy_kcal)

    for basis, tiers in (("aw", result.method_2.actual), ("sw", result.method_2.selected)):
        display[f"{basis}_sed_m2"] = format_kcal(tiers.sedentary_kcal)
        display[f"{basis}_mod_m2"] = format_kcal(tiers.moderate_kcal)
        display[f"{basis}_modh_m2"] = format_kcal(tiers.moderate_high_kcal)
        display[f"{basis}_active_m2"] = format_kcal(tiers.active_kcal)

    for equation in result.energy:
        for basis, estimate in (("aw", equation.actual), ("sw", equation.selected)):
            prefix = f"{basis}_{equation.equation}"
            display[f"{prefix}_bmr"] = format_kcal(estimate.bmr_kcal)
            display[f"{prefix}_tee"] = format_kcal(estimate.tee_kcal)
            display[f"{prefix}_est_kcal"] = format_kcal(estimate.estimated_kcal)

    if result.pediatric_waist is not None:
        percentiles = result.pediatric_waist.percentiles
        display["pediatric_waist"] = (
            f"P10 {percentiles.p10:g} / P50 {percentiles.p50:g} / "
            f"P90 {percentiles.p90:g} cm"
        )
        display["pediatric_waist_ref"] = (
            "Above 90th percentile" if result.pediatric_waist.elevated else ""
        )

    return display
