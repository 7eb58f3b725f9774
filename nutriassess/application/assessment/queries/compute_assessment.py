"""ComputeAssessmentQuery - normalize raw fields and compute an assessment."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from nutriassess.domain.assessment.calculation.assessment_service import (
    AssessmentService,
)
from nutriassess.domain.assessment.calculation.input_normalizer import (
    InputNormalizer,
)
from nutriassess.domain.assessment.core.value_objects.assessment_result import (
    AssessmentResult,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ComputeAssessmentQuery:
    """Query to compute an assessment from raw client fields.

    Attributes:
        fields: Raw field values (snake_case or camelCase keys)
        request_id: Optional correlation id for logging
    """

    fields: Mapping[str, Any] = field(default_factory=dict)
    request_id: Optional[str] = None


class ComputeAssessmentQueryHandler:
    """Handler for ComputeAssessment queries.

    Read-only and side-effect free apart from logging; safe to call
    concurrently from independent requests.
    """

    def __init__(
        self,
        normalizer: Optional[InputNormalizer] = None,
        service: Optional[AssessmentService] = None,
    ) -> None:
        self._normalizer = normalizer or InputNormalizer()
        self._service = service or AssessmentService()

    def handle(self, query: ComputeAssessmentQuery) -> AssessmentResult:
        """
        Handle compute assessment query.

        Args:
            query: ComputeAssessmentQuery with raw fields

        Returns:
            AssessmentResult: Fully populated result, never partial
        """
        data = self._normalizer.normalize(query.fields)
        result = self._service.compute(data)

        logger.info(
            "assessment.computed",
            request_id=query.request_id,
            gender=data.gender.value,
            dry_weight_kg=round(result.body_composition.dry_weight_kg, 2),
            bmi=round(result.bmi_current.value, 2),
            bmi_category=result.bmi_current.label or None,
            weight_loss_severity=result.body_composition.weight_loss.label or None,
        )
        return result
