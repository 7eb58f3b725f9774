"""Unit tests for assessment GraphQL resolvers."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from nutriassess.application.assessment.queries.compute_assessment import (
    ComputeAssessmentQuery,
    ComputeAssessmentQueryHandler,
)
from nutriassess.schema.context import GraphQLContext
from nutriassess.schema.resolvers.assessment_queries import (
    AssessmentQueries,
    map_input_to_fields,
)
from nutriassess.schema.schema import create_schema
from nutriassess.schema.types_assessment import (
    ActivityFactorEnum,
    AssessmentRequestInput,
    FluidDegreeEnum,
    GenderEnum,
)


@pytest.fixture
def mock_info():
    """Mock GraphQL info with a real handler in context."""
    handler = ComputeAssessmentQueryHandler()
    info = MagicMock()
    info.context.get.side_effect = lambda key: (
        handler if key == "assessment_handler" else None
    )
    return info


class TestMapInputToFields:
    """Test GraphQL input to raw field mapping."""

    def test_unset_fields_omitted(self):
        fields = map_input_to_fields(AssessmentRequestInput(height_cm=170.0))

        assert fields == {"height_cm": 170.0}

    def test_enums_mapped_to_values(self):
        fields = map_input_to_fields(
            AssessmentRequestInput(
                gender=GenderEnum.FEMALE,
                activity_factor=ActivityFactorEnum.VERY_ACTIVE,
                birth_date=date(2015, 3, 20),
            )
        )

        assert fields["gender"] == "female"
        assert fields["activity_factor"] == "very_active"
        assert fields["birth_date"] == date(2015, 3, 20)

    def test_kilogram_offset_wins_over_degree(self):
        fields = map_input_to_fields(
            AssessmentRequestInput(
                ascites=FluidDegreeEnum.SEVERE,
                ascites_offset_kg=4.0,
                edema=FluidDegreeEnum.MINIMAL,
            )
        )

        assert fields["ascites_offset_kg"] == 4.0
        assert fields["edema_offset_kg"] == "minimal"


class TestComputeResolver:
    """Test the compute resolver directly."""

    def test_compute(self, mock_info):
        queries = AssessmentQueries()

        result = queries.compute(
            mock_info,
            AssessmentRequestInput(
                gender=GenderEnum.MALE,
                height_cm=180.0,
                current_weight_kg=58.5,
                selected_weight_kg=60.0,
            ),
        )

        assert result.bmi_current.category == "PEM I"
        assert result.bmi_selected.category == "Normal Weight"
        assert result.method_1.applicable_status == "normal"
        assert [e.equation for e in result.energy] == [
            "harris_benedict",
            "mifflin_st_jeor",
        ]
        display = {item.key: item.value for item in result.display}
        assert display["bmi_ref"] == "PEM I"

    def test_compute_passes_fields_to_handler(self):
        handler = MagicMock(wraps=ComputeAssessmentQueryHandler())
        dependencies = {"assessment_handler": handler, "request_id": "req-42"}
        info = MagicMock()
        info.context.get.side_effect = dependencies.get

        AssessmentQueries().compute(
            info, AssessmentRequestInput(ascites=FluidDegreeEnum.MODERATE)
        )

        query = handler.handle.call_args[0][0]
        assert isinstance(query, ComputeAssessmentQuery)
        assert query.fields == {"ascites_offset_kg": "moderate"}
        assert query.request_id == "req-42"

    def test_compute_without_handler_in_context(self):
        info = MagicMock()
        info.context.get.return_value = None

        result = AssessmentQueries().compute(info, AssessmentRequestInput())

        assert result.bmi_current.value == 0.0
        assert result.pediatric_waist is None

    def test_compute_without_context(self):
        info = MagicMock()
        info.context = None

        result = AssessmentQueries().compute(
            info, AssessmentRequestInput(height_cm=180.0, current_weight_kg=60.0)
        )

        assert result.bmi_current.category == "Normal Weight"

    def test_compute_exposes_birth_date_age(self, mock_info):
        result = AssessmentQueries().compute(
            mock_info,
            AssessmentRequestInput(
                birth_date=date(2015, 3, 20), report_date=date(2024, 2, 10)
            ),
        )

        assert result.age_years == 8.0
        assert result.pediatric_age is not None
        assert (
            result.pediatric_age.years,
            result.pediatric_age.months,
            result.pediatric_age.days,
        ) == (8, 10, 21)
        display = {item.key: item.value for item in result.display}
        assert display["age"] == "8y 10m 21d"

    def test_pediatric_reference(self):
        result = AssessmentQueries().pediatric_waist_reference(
            gender=GenderEnum.FEMALE, age_years=10.0
        )

        assert result is not None
        assert result.p90 == 76.6

    def test_pediatric_reference_out_of_range(self):
        assert (
            AssessmentQueries().pediatric_waist_reference(
                gender=GenderEnum.MALE, age_years=40.0
            )
            is None
        )


class TestSchemaExecution:
    """Execute queries against the full schema."""

    def setup_method(self):
        self.schema = create_schema()
        self.context = GraphQLContext(
            assessment_handler=ComputeAssessmentQueryHandler()
        )

    def test_health(self):
        result = self.schema.execute_sync("{ health }")

        assert result.errors is None
        assert result.data == {"health": "ok"}

    def test_compute_query(self):
        query = """
            query Compute($input: AssessmentRequestInput!) {
              assessment {
                compute(input: $input) {
                  bodyComposition {
                    dryWeightKg
                    simple { idealKg adjustedKg selection }
                    protocol { recommendation }
                  }
                  bmiCurrent { value category }
                  waist { label }
                }
              }
            }
        """
        variables = {
            "input": {
                "gender": "MALE",
                "heightCm": 170,
                "currentWeightKg": 80,
                "waistCm": 95,
                "activityFactor": "MODERATE",
            }
        }

        result = self.schema.execute_sync(
            query, variable_values=variables, context_value=self.context
        )

        assert result.errors is None
        compute = result.data["assessment"]["compute"]
        assert compute["bodyComposition"]["dryWeightKg"] == pytest.approx(80.0)
        assert compute["bodyComposition"]["simple"]["idealKg"] == pytest.approx(70.0)
        assert compute["bodyComposition"]["simple"]["adjustedKg"] == pytest.approx(
            73.8
        )
        assert compute["bodyComposition"]["simple"]["selection"] == "Use IBW"
        assert compute["waist"]["label"] == "Overweight (94-102)"
        assert compute["bmiCurrent"]["category"] == "Overweight"

    def test_pediatric_reference_query(self):
        query = """
            {
              assessment {
                pediatricWaistReference(gender: MALE, ageYears: 10) { p10 p50 p90 }
              }
            }
        """

        result = self.schema.execute_sync(query)

        assert result.errors is None
        assert result.data["assessment"]["pediatricWaistReference"] == {
            "p10": 57.0,
            "p50": 63.3,
            "p90": 78.0,
        }

    def test_birth_date_age_query(self):
        query = """
            {
              assessment {
                compute(input: {birthDate: "2015-03-20", reportDate: "2024-02-10",
                                activityFactor: MILD}) {
                  ageYears
                  pediatricAge { years months days }
                  activityLabel
                }
              }
            }
        """

        result = self.schema.execute_sync(query, context_value=self.context)

        assert result.errors is None
        compute = result.data["assessment"]["compute"]
        assert compute["ageYears"] == 8.0
        assert compute["pediatricAge"] == {"years": 8, "months": 10, "days": 21}
        assert compute["activityLabel"] == "Mild"

    def test_adult_has_no_pediatric_age(self):
        query = """
            {
              assessment {
                compute(input: {ageYears: 45}) { ageYears pediatricAge { years } }
              }
            }
        """

        result = self.schema.execute_sync(query, context_value=self.context)

        assert result.errors is None
        assert result.data["assessment"]["compute"] == {
            "ageYears": 45.0,
            "pediatricAge": None,
        }

    def test_huge_magnitudes_never_error(self):
        query = """
            {
              assessment {
                compute(input: {currentWeightKg: 1e307, heightCm: 1,
                                selectedWeightKg: 1e300, activityFactor: SEDENTARY}) {
                  bmiCurrent { value }
                  bmiSelected { value }
                  energy { actual { teeKcal } selected { teeKcal } }
                }
              }
            }
        """

        result = self.schema.execute_sync(query, context_value=self.context)

        assert result.errors is None
        compute = result.data["assessment"]["compute"]
        assert compute["bmiCurrent"]["value"] == 0.0
        assert compute["bmiSelected"]["value"] == 0.0

    def test_compute_without_context_value(self):
        result = self.schema.execute_sync(
            "{ assessment { compute(input: {heightCm: 180}) { bmiCurrent { value } } } }"
        )

        assert result.errors is None
        assert result.data["assessment"]["compute"]["bmiCurrent"]["value"] == 0.0
