"""Unit tests for assessment value objects."""

import dataclasses

import pytest

from nutriassess.domain.assessment.core.exceptions.domain_errors import (
    InvalidAssessmentInputError,
    InvalidEnumeratedValueError,
)
from nutriassess.domain.assessment.core.value_objects import (
    ActivityFactor,
    AscitesDegree,
    AssessmentInput,
    BMICategory,
    ChangeDuration,
    EdemaDegree,
    Gender,
    PediatricAge,
    WeightStatus,
)
from nutriassess.domain.assessment.core.value_objects.assessment_input import (
    MAX_MAGNITUDE,
)


class TestAssessmentInput:
    """Test AssessmentInput value object."""

    def test_defaults_describe_blank_calculator(self):
        """Test the default snapshot is the all-zero initial state."""
        data = AssessmentInput()

        assert data.gender == Gender.MALE
        assert data.height_cm == 0.0
        assert data.current_weight_kg == 0.0
        assert data.activity_factor == ActivityFactor.UNSET
        assert data.change_duration == ChangeDuration.UNSET
        assert data.pediatric_age is None

    def test_negative_measurement_raises(self):
        """Test that negative measurements are rejected."""
        with pytest.raises(InvalidAssessmentInputError, match="height_cm"):
            AssessmentInput(height_cm=-1.0)

    def test_non_finite_weight_raises(self):
        """Test that NaN weights are rejected."""
        with pytest.raises(InvalidAssessmentInputError):
            AssessmentInput(current_weight_kg=float("nan"))

    def test_infinite_deficit_raises(self):
        """Test that deficit must be finite."""
        with pytest.raises(InvalidAssessmentInputError, match="calorie_deficit_kcal"):
            AssessmentInput(calorie_deficit_kcal=float("inf"))

    def test_negative_deficit_allowed(self):
        """Test that a surplus is expressed as a negative deficit."""
        data = AssessmentInput(calorie_deficit_kcal=-300.0)

        assert data.calorie_deficit_kcal == -300.0

    def test_is_immutable(self):
        """Test that the snapshot cannot be mutated."""
        data = AssessmentInput(height_cm=170.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            data.height_cm = 180.0  # type: ignore[misc]

    def test_magnitude_above_bound_raises(self):
        """Test that absurd magnitudes are rejected before they can overflow."""
        with pytest.raises(InvalidAssessmentInputError, match="current_weight_kg"):
            AssessmentInput(current_weight_kg=MAX_MAGNITUDE * 10)

    def test_deficit_above_bound_raises(self):
        with pytest.raises(InvalidAssessmentInputError):
            AssessmentInput(calorie_deficit_kcal=-1e307)

    def test_magnitude_at_bound_allowed(self):
        data = AssessmentInput(height_cm=MAX_MAGNITUDE)

        assert data.height_cm == MAX_MAGNITUDE

    def test_pediatric_age_str(self):
        assert str(PediatricAge(years=8, months=10, days=21)) == "8y 10m 21d"


class TestGender:
    """Test Gender enum."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("male", Gender.MALE),
            ("M", Gender.MALE),
            (" Female ", Gender.FEMALE),
            ("f", Gender.FEMALE),
            (Gender.FEMALE, Gender.FEMALE),
        ],
    )
    def test_parse(self, raw, expected):
        assert Gender.parse(raw) == expected

    def test_parse_unknown_raises(self):
        with pytest.raises(InvalidEnumeratedValueError):
            Gender.parse("other")

    def test_abw_multiplier(self):
        assert Gender.MALE.abw_multiplier() == 0.38
        assert Gender.FEMALE.abw_multiplier() == 0.32


class TestActivityFactor:
    """Test ActivityFactor enum."""

    def test_multipliers_match_calculator_options(self):
        expected = {
            ActivityFactor.UNSET: 0.0,
            ActivityFactor.MILD: 1.375,
            ActivityFactor.SEDENTARY: 1.5,
            ActivityFactor.MODERATE: 1.55,
            ActivityFactor.VERY_ACTIVE: 1.725,
            ActivityFactor.HEAVY_ACTIVE: 1.9,
        }

        for factor, multiplier in expected.items():
            assert factor.multiplier() == multiplier

    def test_parse_numeric(self):
        assert ActivityFactor.parse(1.9) == ActivityFactor.HEAVY_ACTIVE
        assert ActivityFactor.parse("1.375") == ActivityFactor.MILD
        assert ActivityFactor.parse(0) == ActivityFactor.UNSET

    def test_parse_name(self):
        assert ActivityFactor.parse("Very_Active") == ActivityFactor.VERY_ACTIVE

    def test_parse_unsupported_value_raises(self):
        with pytest.raises(InvalidEnumeratedValueError):
            ActivityFactor.parse(1.6)

    def test_description(self):
        assert ActivityFactor.SEDENTARY.description() == "Sedentary"


class TestChangeDuration:
    """Test ChangeDuration enum."""

    def test_codes(self):
        assert ChangeDuration.WEEK.code() == 2.0
        assert ChangeDuration.ONE_MONTH.code() == 5.0
        assert ChangeDuration.THREE_MONTHS.code() == 7.5
        assert ChangeDuration.SIX_MONTHS.code() == 10.0
        assert ChangeDuration.ONE_YEAR.code() == 20.0

    def test_parse(self):
        assert ChangeDuration.parse(7.5) == ChangeDuration.THREE_MONTHS
        assert ChangeDuration.parse("20") == ChangeDuration.ONE_YEAR
        assert ChangeDuration.parse("week") == ChangeDuration.WEEK

    def test_parse_unknown_raises(self):
        with pytest.raises(InvalidEnumeratedValueError, match="change duration"):
            ChangeDuration.parse(3)


class TestFluidRetention:
    """Test ascites/edema offsets."""

    def test_ascites_offsets(self):
        assert AscitesDegree.NONE.offset_kg() == 0.0
        assert AscitesDegree.MINIMAL.offset_kg() == 2.2
        assert AscitesDegree.MODERATE.offset_kg() == 6.0
        assert AscitesDegree.SEVERE.offset_kg() == 14.0

    def test_edema_offsets(self):
        assert EdemaDegree.NONE.offset_kg() == 0.0
        assert EdemaDegree.MINIMAL.offset_kg() == 1.0
        assert EdemaDegree.MODERATE.offset_kg() == 5.0
        assert EdemaDegree.SEVERE.offset_kg() == 10.0


class TestBMICategory:
    """Test BMI category to weight status mapping."""

    @pytest.mark.parametrize(
        "category,status",
        [
            (BMICategory.PEM_III, WeightStatus.UNDERWEIGHT),
            (BMICategory.PEM_I, WeightStatus.UNDERWEIGHT),
            (BMICategory.NORMAL, WeightStatus.NORMAL),
            (BMICategory.OVERWEIGHT, WeightStatus.OVERWEIGHT),
            (BMICategory.EXTREME_OBESITY, WeightStatus.OVERWEIGHT),
        ],
    )
    def test_weight_status(self, category, status):
        assert category.weight_status() == status
