"""InputNormalizer - coerce raw form fields into an AssessmentInput.

Raw values arrive from forms, GraphQL or JSON and may be None, empty
strings, numeric strings or enum names. Nothing here raises for missing
or malformed data: a bad field degrades to its blank value and a warning
is logged.
"""

import math
from datetime import date, datetime
from typing import Any, Callable, Mapping, Optional, Union

import structlog
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..core.exceptions.domain_errors import InvalidEnumeratedValueError
from ..core.value_objects.activity_factor import ActivityFactor
from ..core.value_objects.assessment_input import MAX_MAGNITUDE, AssessmentInput
from ..core.value_objects.change_duration import ChangeDuration
from ..core.value_objects.fluid_retention import AscitesDegree, EdemaDegree
from ..core.value_objects.gender import Gender
from .age_service import AgeService

logger = structlog.get_logger(__name__)


def _to_number(value: Any, field: str) -> float:
    """Parse a number; blanks, garbage and absurd magnitudes become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("input.unparseable_number", field=field, value=value)
        return 0.0
    if not math.isfinite(number):
        logger.warning("input.non_finite_number", field=field, value=value)
        return 0.0
    if abs(number) > MAX_MAGNITUDE:
        logger.warning("input.out_of_range", field=field, value=number)
        return 0.0
    return number


def _to_measurement(value: Any, field: str) -> float:
    """Parse a physical measurement, clamped to >= 0."""
    number = _to_number(value, field)
    if number < 0:
        logger.warning("input.negative_measurement", field=field, value=number)
        return 0.0
    return number


class RawAssessmentInput(BaseModel):
    """Loosely-typed assessment fields as submitted by a client.

    Field names are accepted in snake_case or camelCase. Either a manual
    `age_years` or a `birth_date` (with an optional `report_date`) may be
    given; the birth date wins.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    gender: Gender = Gender.MALE
    age_years: float = 0.0
    birth_date: Optional[date] = None
    report_date: Optional[date] = None
    height_cm: float = 0.0
    waist_cm: float = 0.0
    current_weight_kg: float = 0.0
    usual_weight_kg: float = 0.0
    selected_weight_kg: float = 0.0
    activity_factor: ActivityFactor = ActivityFactor.UNSET
    change_duration: ChangeDuration = Field(
        default=ChangeDuration.UNSET,
        validation_alias=AliasChoices(
            "change_duration", "changeDuration", "changeDurationCode"
        ),
    )
    ascites_offset_kg: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "ascites_offset_kg", "ascitesOffsetKg", "ascites"
        ),
    )
    edema_offset_kg: float = Field(
        default=0.0,
        validation_alias=AliasChoices("edema_offset_kg", "edemaOffsetKg", "edema"),
    )
    calorie_deficit_kcal: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "calorie_deficit_kcal", "calorieDeficitKcal", "deficit"
        ),
    )

    @field_validator("gender", mode="before")
    @classmethod
    def _gender(cls, v: Any) -> Gender:
        if v is None or v == "":
            return Gender.MALE
        try:
            return Gender.parse(v)
        except InvalidEnumeratedValueError:
            logger.warning("input.unknown_gender", value=v)
            return Gender.MALE

    @field_validator(
        "age_years",
        "height_cm",
        "waist_cm",
        "current_weight_kg",
        "usual_weight_kg",
        "selected_weight_kg",
        mode="before",
    )
    @classmethod
    def _measurement(cls, v: Any, info: ValidationInfo) -> float:
        return _to_measurement(v, info.field_name or "")

    @field_validator("calorie_deficit_kcal", mode="before")
    @classmethod
    def _deficit(cls, v: Any) -> float:
        return _to_number(v, "calorie_deficit_kcal")

    @field_validator("ascites_offset_kg", mode="before")
    @classmethod
    def _ascites(cls, v: Any) -> float:
        if isinstance(v, AscitesDegree):
            return v.offset_kg()
        if isinstance(v, str):
            try:
                return AscitesDegree(v.strip().lower()).offset_kg()
            except ValueError:
                pass
        return _to_measurement(v, "ascites_offset_kg")

    @field_validator("edema_offset_kg", mode="before")
    @classmethod
    def _edema(cls, v: Any) -> float:
        if isinstance(v, EdemaDegree):
            return v.offset_kg()
        if isinstance(v, str):
            try:
                return EdemaDegree(v.strip().lower()).offset_kg()
            except ValueError:
                pass
        return _to_measurement(v, "edema_offset_kg")

    @field_validator("activity_factor", mode="before")
    @classmethod
    def _activity(cls, v: Any) -> ActivityFactor:
        if v is None or v == "":
            return ActivityFactor.UNSET
        try:
            return ActivityFactor.parse(v)
        except InvalidEnumeratedValueError:
            logger.warning("input.unknown_activity_factor", value=v)
            return ActivityFactor.UNSET

    @field_validator("change_duration", mode="before")
    @classmethod
    def _duration(cls, v: Any) -> ChangeDuration:
        if v is None or v == "":
            return ChangeDuration.UNSET
        try:
            return ChangeDuration.parse(v)
        except InvalidEnumeratedValueError:
            logger.warning("input.unknown_change_duration", value=v)
            return ChangeDuration.UNSET

    @field_validator("birth_date", "report_date", mode="before")
    @classmethod
    def _date(cls, v: Any, info: ValidationInfo) -> Optional[date]:
        if v is None or v == "":
            return None
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        try:
            return date.fromisoformat(str(v).strip()[:10])
        except ValueError:
            logger.warning("input.unparseable_date", field=info.field_name, value=v)
            return None


RawInput = Union[RawAssessmentInput, Mapping[str, Any], None]


class InputNormalizer:
    """Turn raw client fields into a validated AssessmentInput.

    Example:
        >>> normalizer = InputNormalizer()
        >>> data = normalizer.normalize({"heightCm": "180", "currentWeightKg": ""})
        >>> data.height_cm, data.current_weight_kg
        (180.0, 0.0)
    """

    def __init__(
        self,
        age_service: Optional[AgeService] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._age_service = age_service or AgeService()
        self._today = today

    def parse(self, raw: RawInput) -> RawAssessmentInput:
        if isinstance(raw, RawAssessmentInput):
            return raw
        return RawAssessmentInput.model_validate(dict(raw or {}))

    def normalize(self, raw: RawInput) -> AssessmentInput:
        """Normalize raw fields; never raises for missing data."""
        fields = self.parse(raw)

        age: float = fields.age_years
        pediatric_age = None
        if fields.birth_date is not None:
            report_date = fields.report_date or self._today()
            years, pediatric_age = self._age_service.from_birth_date(
                fields.birth_date, report_date
            )
            age = float(years)

        return AssessmentInput(
            gender=fields.gender,
            age_years=age,
            height_cm=fields.height_cm,
            waist_cm=fields.waist_cm,
            current_weight_kg=fields.current_weight_kg,
            usual_weight_kg=fields.usual_weight_kg,
            selected_weight_kg=fields.selected_weight_kg,
            activity_factor=fields.activity_factor,
            change_duration=fields.change_duration,
            ascites_offset_kg=fields.ascites_offset_kg,
            edema_offset_kg=fields.edema_offset_kg,
            calorie_deficit_kcal=fields.calorie_deficit_kcal,
            pediatric_age=pediatric_age,
        )
