"""Unit tests for WeightBasedCalorieService."""

import pytest

from nutriassess.domain.assessment.calculation.weight_based_calorie_service import (
    WeightBasedCalorieService,
)
from nutriassess.domain.assessment.core.value_objects import WeightStatus


class TestMethod1:
    """Test the weight status x activity matrix."""

    def setup_method(self):
        self.service = WeightBasedCalorieService()

    def test_matrix_against_selected_weight(self):
        matrix = self.service.method_1(60.0, WeightStatus.NORMAL)

        assert (
            matrix.underweight.sedentary_kcal,
            matrix.underweight.moderate_kcal,
            matrix.underweight.heavy_kcal,
        ) == (2100.0, 2400.0, 2700.0)
        assert (
            matrix.normal.sedentary_kcal,
            matrix.normal.moderate_kcal,
            matrix.normal.heavy_kcal,
        ) == (1800.0, 2100.0, 2400.0)
        assert (
            matrix.overweight.sedentary_kcal,
            matrix.overweight.moderate_kcal,
            matrix.overweight.heavy_kcal,
        ) == (1200.0, 1800.0, 2100.0)

    def test_applicable_row(self):
        matrix = self.service.method_1(60.0, WeightStatus.OVERWEIGHT)

        assert matrix.applicable_status == WeightStatus.OVERWEIGHT
        assert matrix.applicable() == matrix.overweight
        assert matrix.row(WeightStatus.UNDERWEIGHT) == matrix.underweight

    def test_no_status_no_applicable_row(self):
        matrix = self.service.method_1(60.0, None)

        assert matrix.applicable() is None

    def test_zero_weight(self):
        matrix = self.service.method_1(0.0, None)

        assert matrix.normal.heavy_kcal == 0.0


class TestMethod2:
    """Test activity tier estimates."""

    def setup_method(self):
        self.service = WeightBasedCalorieService()

    def test_actual_and_selected(self):
        comparison = self.service.method_2(70.0, 60.0)

        assert comparison.actual.sedentary_kcal == pytest.approx(1750.0)
        assert comparison.actual.moderate_kcal == pytest.approx(2100.0)
        assert comparison.actual.moderate_high_kcal == pytest.approx(2450.0)
        assert comparison.actual.active_kcal == pytest.approx(2800.0)
        assert comparison.selected.sedentary_kcal == pytest.approx(1500.0)
        assert comparison.selected.active_kcal == pytest.approx(2400.0)
