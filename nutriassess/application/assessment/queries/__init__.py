"""Assessment queries."""

from .compute_assessment import (
    ComputeAssessmentQuery,
    ComputeAssessmentQueryHandler,
)

__all__ = ["ComputeAssessmentQuery", "ComputeAssessmentQueryHandler"]
