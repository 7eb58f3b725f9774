"""Domain exceptions for clinical assessment."""

from .domain_errors import (
    AssessmentDomainError,
    InvalidAssessmentInputError,
    InvalidEnumeratedValueError,
    PediatricReferenceNotFoundError,
)

__all__ = [
    "AssessmentDomainError",
    "InvalidAssessmentInputError",
    "InvalidEnumeratedValueError",
    "PediatricReferenceNotFoundError",
]
