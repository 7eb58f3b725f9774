"""Body composition value objects - dry weight, IBW/ABW and weight trend."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class WeightLossSeverity(str, Enum):
    """Malnutrition severity implied by recent weight loss."""

    NONE = ""
    MODERATE = "Moderate Malnutrition"
    SEVERE = "Severe Malnutrition"


class IBWSelection(str, Enum):
    """Which reference weight to use for nutrition targets."""

    USE_IBW = "Use IBW"
    USE_ABW = "Use ABW"


class ProtocolRecommendation(str, Enum):
    """Outcome of the 30% obesity protocol check."""

    USE_IDEAL = "Use Ideal Body Weight"
    USE_ADJUSTED = "Use Adjusted Body Weight"


@dataclass(frozen=True)
class WeightLossAssessment:
    """Percent loss from usual weight and its severity.

    Attributes:
        percent: Loss relative to usual weight (0 when no usual weight)
        severity: Severity for the selected change duration
        has_usual_weight: Whether a usual weight was provided
    """

    percent: float
    severity: WeightLossSeverity
    has_usual_weight: bool

    @property
    def label(self) -> str:
        return self.severity.value


@dataclass(frozen=True)
class IdealWeightEstimate:
    """One ideal body weight formula with its adjusted weight.

    Attributes:
        ideal_kg: Ideal body weight (floored at 0)
        adjusted_kg: Adjusted body weight against ideal_kg (floored at 0)
        deviation_percent: Excess of dry weight over ideal, in percent of
            dry weight; None when there is no dry weight
        selection: IBW/ABW recommendation; None with the deviation
    """

    ideal_kg: float
    adjusted_kg: float
    deviation_percent: Optional[float]
    selection: Optional[IBWSelection]

    @property
    def selection_label(self) -> str:
        return self.selection.value if self.selection else ""


@dataclass(frozen=True)
class IBWProtocol:
    """30% rule: above IBW + 30% the adjusted weight is recommended."""

    margin_kg: float
    threshold_kg: float
    is_high_obesity: bool
    recommended_weight_kg: float
    recommendation: ProtocolRecommendation


@dataclass(frozen=True)
class BodyComposition:
    """All weight figures derived from one input snapshot.

    Attributes:
        dry_weight_kg: Current weight minus fluid offsets
        weight_loss: Weight trend against usual weight
        simple: IBW = height - 100 and its ABW
        accurate: Devine-style IBW and its ABW
        protocol: 30% protocol applied to the accurate IBW
    """

    dry_weight_kg: float
    weight_loss: WeightLossAssessment
    simple: IdealWeightEstimate
    accurate: IdealWeightEstimate
    protocol: IBWProtocol
