"""WeightBasedCalorieService - flat kcal/kg cross-check estimators."""

from typing import Optional

from ..core.value_objects.classification import WeightStatus
from ..core.value_objects.energy import (
    ActivityTierCalories,
    ActivityTierComparison,
    StatusCalorieRow,
    WeightStatusCalorieMatrix,
)

# kcal/kg for sedentary, moderate and heavy activity, by weight status
STATUS_KCAL_PER_KG = {
    WeightStatus.UNDERWEIGHT: (35, 40, 45),
    WeightStatus.NORMAL: (30, 35, 40),
    WeightStatus.OVERWEIGHT: (20, 30, 35),
}

# kcal/kg for sedentary, moderate, moderate-high and active
ACTIVITY_KCAL_PER_KG = (25, 30, 35, 40)


class WeightBasedCalorieService:
    """Coarse calorie estimates from body weight alone.

    Method 1 multiplies the selected weight by a rate chosen from weight
    status and activity. Method 2 multiplies both weights by an activity
    tier rate. The results are cross-checks for the BMR-based estimate
    and are never reconciled with it.
    """

    def method_1(
        self, selected_weight_kg: float, status: Optional[WeightStatus]
    ) -> WeightStatusCalorieMatrix:
        """Build the 3x3 matrix against the selected weight.

        Args:
            selected_weight_kg: Clinician-selected weight
            status: Weight status from the BMI classification, if known

        Example:
            >>> matrix = WeightBasedCalorieService().method_1(60.0, None)
            >>> matrix.normal.moderate_kcal
            2100.0
        """

        def row(status_key: WeightStatus) -> StatusCalorieRow:
            sedentary, moderate, heavy = STATUS_KCAL_PER_KG[status_key]
            return StatusCalorieRow(
                sedentary_kcal=selected_weight_kg * sedentary,
                moderate_kcal=selected_weight_kg * moderate,
                heavy_kcal=selected_weight_kg * heavy,
            )

        return WeightStatusCalorieMatrix(
            underweight=row(WeightStatus.UNDERWEIGHT),
            normal=row(WeightStatus.NORMAL),
            overweight=row(WeightStatus.OVERWEIGHT),
            applicable_status=status,
        )

    def activity_tiers(self, weight_kg: float) -> ActivityTierCalories:
        sedentary, moderate, moderate_high, active = ACTIVITY_KCAL_PER_KG
        return ActivityTierCalories(
            sedentary_kcal=weight_kg * sedentary,
            moderate_kcal=weight_kg * moderate,
            moderate_high_kcal=weight_kg * moderate_high,
            active_kcal=weight_kg * active,
        )

    def method_2(
        self, actual_weight_kg: float, selected_weight_kg: float
    ) -> ActivityTierComparison:
        """Activity-tier estimates for the actual and the selected weight."""
        return ActivityTierComparison(
            actual=self.activity_tiers(actual_weight_kg),
            selected=self.activity_tiers(selected_weight_kg),
        )
