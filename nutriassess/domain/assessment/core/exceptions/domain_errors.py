"""Domain exceptions for clinical assessment."""


class AssessmentDomainError(Exception):
    """Base exception for assessment domain errors."""

    pass


class InvalidAssessmentInputError(AssessmentDomainError):
    """Raised when an assessment input snapshot violates its constraints."""

    pass


class InvalidEnumeratedValueError(AssessmentDomainError):
    """Raised when a raw value does not map onto an enumerated option."""

    def __init__(self, field: str, value: object):
        super().__init__(f"Unsupported {field}: {value!r}")
        self.field = field
        self.value = value


class PediatricReferenceNotFoundError(AssessmentDomainError):
    """Raised when no pediatric waist reference exists for an age."""

    def __init__(self, gender: str, age: float):
        super().__init__(
            f"No pediatric waist reference for {gender} aged {age} "
            "(available ages: 2-18)"
        )
        self.gender = gender
        self.age = age
