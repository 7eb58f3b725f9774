"""BodyCompositionService - dry weight, weight loss and IBW/ABW."""

from typing import Optional

from ..core.value_objects.assessment_input import AssessmentInput
from ..core.value_objects.body_composition import (
    BodyComposition,
    IBWProtocol,
    IBWSelection,
    IdealWeightEstimate,
    ProtocolRecommendation,
    WeightLossAssessment,
    WeightLossSeverity,
)
from ..core.value_objects.change_duration import ChangeDuration
from ..core.value_objects.gender import Gender

# Deviation above which the adjusted weight is preferred
IBW_DEVIATION_LIMIT_PERCENT = 30.0

# Protocol margin over the accurate IBW
PROTOCOL_MARGIN = 0.30

# Fixed thresholds for the one-week duration
WEEK_MODERATE_LOSS_PERCENT = 1.0
WEEK_SEVERE_LOSS_PERCENT = 2.0


class BodyCompositionService:
    """Resolve the weight figures of an assessment.

    Formulas:
        Dry weight:  max(0, current - ascites - edema)
        IBW (simple):   height(cm) - 100
        IBW (accurate): (height(cm) - 154) x 0.9 + 50    (men)
                        (height(cm) - 154) x 0.9 + 45.5  (women)
        ABW:         (weight - IBW) x 0.38 + IBW  (men)
                     (weight - IBW) x 0.32 + IBW  (women)

    Every derived weight is floored at 0.
    """

    def dry_weight(
        self, current_kg: float, ascites_kg: float, edema_kg: float
    ) -> float:
        """Weight without retained fluid, floored at 0."""
        return max(0.0, current_kg - ascites_kg - edema_kg)

    def weight_loss_percent(self, usual_kg: float, weight_kg: float) -> float:
        """Loss relative to usual weight, floored at 0.

        Returns 0 when no usual weight is known.
        """
        if usual_kg <= 0:
            return 0.0
        return max(0.0, (usual_kg - weight_kg) / usual_kg * 100)

    def weight_loss_severity(
        self, loss_percent: float, duration: ChangeDuration
    ) -> WeightLossSeverity:
        """Grade weight loss for the period it happened in.

        A one-week change uses fixed 1%/2% thresholds. Any other period
        reuses its duration code as the threshold: equal to the code is
        moderate, above it severe.

        Example:
            >>> service = BodyCompositionService()
            >>> service.weight_loss_severity(5.0, ChangeDuration.ONE_MONTH)
            <WeightLossSeverity.MODERATE: 'Moderate Malnutrition'>
        """
        code = duration.code()
        if code <= 0:
            return WeightLossSeverity.NONE

        if duration is ChangeDuration.WEEK:
            if loss_percent > WEEK_SEVERE_LOSS_PERCENT:
                return WeightLossSeverity.SEVERE
            if loss_percent > WEEK_MODERATE_LOSS_PERCENT:
                return WeightLossSeverity.MODERATE
            return WeightLossSeverity.NONE

        if loss_percent > code:
            return WeightLossSeverity.SEVERE
        if loss_percent == code:
            return WeightLossSeverity.MODERATE
        return WeightLossSeverity.NONE

    def simple_ibw(self, height_cm: float) -> float:
        """IBW = height - 100, floored at 0."""
        return max(0.0, height_cm - 100)

    def accurate_ibw(self, gender: Gender, height_cm: float) -> float:
        """Devine-style IBW, floored at 0.

        Example:
            >>> BodyCompositionService().accurate_ibw(Gender.MALE, 174.0)
            68.0
        """
        base = 50.0 if gender is Gender.MALE else 45.5
        return max(0.0, (height_cm - 154) * 0.9 + base)

    def adjusted_body_weight(
        self, gender: Gender, weight_kg: float, ibw_kg: float
    ) -> float:
        """ABW against the given IBW, floored at 0."""
        abw = (weight_kg - ibw_kg) * gender.abw_multiplier() + ibw_kg
        return max(0.0, abw)

    def ibw_deviation(self, weight_kg: float, ibw_kg: float) -> Optional[float]:
        """Excess over IBW in percent of weight; None without a weight."""
        if weight_kg <= 0:
            return None
        return max(0.0, (weight_kg - ibw_kg) / weight_kg * 100)

    def ibw_selection(self, deviation: Optional[float]) -> Optional[IBWSelection]:
        """Use IBW up to a 30% deviation, ABW above it."""
        if deviation is None:
            return None
        if deviation <= IBW_DEVIATION_LIMIT_PERCENT:
            return IBWSelection.USE_IBW
        return IBWSelection.USE_ABW

    def ideal_weight_estimate(
        self, gender: Gender, weight_kg: float, ibw_kg: float
    ) -> IdealWeightEstimate:
        deviation = self.ibw_deviation(weight_kg, ibw_kg)
        return IdealWeightEstimate(
            ideal_kg=ibw_kg,
            adjusted_kg=self.adjusted_body_weight(gender, weight_kg, ibw_kg),
            deviation_percent=deviation,
            selection=self.ibw_selection(deviation),
        )

    def protocol(
        self, weight_kg: float, accurate: IdealWeightEstimate
    ) -> IBWProtocol:
        """Apply the 30% rule to the accurate IBW.

        Above IBW + 30% of IBW the adjusted body weight is recommended.
        """
        margin = accurate.ideal_kg * PROTOCOL_MARGIN
        threshold = accurate.ideal_kg + margin
        high_obesity = weight_kg > threshold
        return IBWProtocol(
            margin_kg=margin,
            threshold_kg=threshold,
            is_high_obesity=high_obesity,
            recommended_weight_kg=(
                accurate.adjusted_kg if high_obesity else accurate.ideal_kg
            ),
            recommendation=(
                ProtocolRecommendation.USE_ADJUSTED
                if high_obesity
                else ProtocolRecommendation.USE_IDEAL
            ),
        )

    def resolve(self, data: AssessmentInput) -> BodyComposition:
        """Compute all body composition figures for a snapshot."""
        weight = self.dry_weight(
            data.current_weight_kg, data.ascites_offset_kg, data.edema_offset_kg
        )

        loss = self.weight_loss_percent(data.usual_weight_kg, weight)
        weight_loss = WeightLossAssessment(
            percent=loss,
            severity=self.weight_loss_severity(loss, data.change_duration),
            has_usual_weight=data.usual_weight_kg > 0,
        )

        simple = self.ideal_weight_estimate(
            data.gender, weight, self.simple_ibw(data.height_cm)
        )
        accurate = self.ideal_weight_estimate(
            data.gender, weight, self.accurate_ibw(data.gender, data.height_cm)
        )

        return BodyComposition(
            dry_weight_kg=weight,
            weight_loss=weight_loss,
            simple=simple,
            accurate=accurate,
            protocol=self.protocol(weight, accurate),
        )
