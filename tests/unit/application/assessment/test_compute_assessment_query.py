"""Unit tests for ComputeAssessmentQueryHandler."""

import math
from unittest.mock import Mock

import pytest
from structlog.testing import capture_logs

from nutriassess.application.assessment.queries.compute_assessment import (
    ComputeAssessmentQuery,
    ComputeAssessmentQueryHandler,
)
from nutriassess.domain.assessment.calculation.assessment_service import (
    AssessmentService,
)
from nutriassess.domain.assessment.core.value_objects import AssessmentInput, Gender


class TestComputeAssessmentQueryHandler:
    """Test ComputeAssessmentQueryHandler."""

    def setup_method(self):
        self.handler = ComputeAssessmentQueryHandler()

    def test_handle_computes_from_raw_fields(self):
        query = ComputeAssessmentQuery(
            fields={"gender": "female", "heightCm": "160", "currentWeightKg": "70"}
        )

        result = self.handler.handle(query)

        assert result.input.gender == Gender.FEMALE
        assert result.bmi_current.value == pytest.approx(27.34375)
        assert result.bmi_current.label == "Overweight"

    def test_handle_empty_query(self):
        result = self.handler.handle(ComputeAssessmentQuery())

        assert result.input == AssessmentInput()
        assert result.bmi_current.value == 0.0

    def test_logs_computation(self):
        query = ComputeAssessmentQuery(
            fields={"height_cm": 180, "current_weight_kg": 58.5},
            request_id="req-1",
        )

        with capture_logs() as logs:
            self.handler.handle(query)

        events = [log for log in logs if log["event"] == "assessment.computed"]
        assert len(events) == 1
        assert events[0]["request_id"] == "req-1"
        assert events[0]["bmi_category"] == "PEM I"
        assert events[0]["weight_loss_severity"] is None

    def test_uses_injected_service(self):
        service = Mock(wraps=AssessmentService())
        handler = ComputeAssessmentQueryHandler(service=service)

        handler.handle(ComputeAssessmentQuery(fields={"height_cm": 170}))

        service.compute.assert_called_once()
        (data,), _ = service.compute.call_args
        assert data.height_cm == 170.0

    def test_huge_weight_yields_finite_result(self):
        query = ComputeAssessmentQuery(
            fields={"currentWeightKg": "1e307", "heightCm": "1", "activityFactor": 1.5}
        )

        result = self.handler.handle(query)

        assert result.bmi_current.value == 0.0
        harris = result.equation("harris_benedict")
        assert math.isfinite(harris.actual.bmr_kcal)
        assert math.isfinite(harris.actual.tee_kcal)
