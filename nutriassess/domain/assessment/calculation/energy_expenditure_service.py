"""EnergyExpenditureService - BMR equations, TEE and calorie targets."""

from typing import Sequence, Tuple

from ..core.ports.calculators import IBMREquation
from ..core.value_objects.activity_factor import ActivityFactor
from ..core.value_objects.energy import EnergyEstimate, EquationResult
from ..core.value_objects.gender import Gender


class HarrisBenedictEquation(IBMREquation):
    """Harris-Benedict BMR equation.

    Formula:
        Men:   BMR = 66.5 + 13.75 x weight(kg) + 5.003 x height(cm) - 6.75 x age
        Women: BMR = 655.1 + 9.563 x weight(kg) + 1.850 x height(cm) - 4.676 x age

    References:
        Harris JA, Benedict FG. A biometric study of human basal
        metabolism. Proc Natl Acad Sci USA. 1918;4(12):370-373.
    """

    name = "harris_benedict"

    def calculate(
        self,
        gender: Gender,
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        """Calculate BMR.

        Example:
            >>> round(HarrisBenedictEquation().calculate(Gender.MALE, 70, 175, 30), 3)
            1705.075
        """
        if gender is Gender.MALE:
            return 66.5 + 13.75 * weight_kg + 5.003 * height_cm - 6.75 * age_years
        return 655.1 + 9.563 * weight_kg + 1.850 * height_cm - 4.676 * age_years


class MifflinStJeorEquation(IBMREquation):
    """Mifflin-St Jeor BMR equation.

    Formula:
        Men:   BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age + 5
        Women: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    name = "mifflin_st_jeor"

    def calculate(
        self,
        gender: Gender,
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
        if gender is Gender.MALE:
            return base + 5
        return base - 161


class EnergyExpenditureService:
    """Estimate energy needs with every configured BMR equation.

    For each equation and each weight basis:
        TEE       = BMR x activity factor
        Estimate  = TEE - calorie deficit (a negative deficit adds calories)
    """

    def __init__(self, equations: Sequence[IBMREquation] = ()) -> None:
        self._equations: Tuple[IBMREquation, ...] = tuple(equations) or (
            HarrisBenedictEquation(),
            MifflinStJeorEquation(),
        )

    @property
    def equations(self) -> Tuple[IBMREquation, ...]:
        return self._equations

    def total_energy_expenditure(
        self, bmr_kcal: float, activity: ActivityFactor
    ) -> float:
        """TEE = BMR x activity multiplier (0 while unset)."""
        return bmr_kcal * activity.multiplier()

    def estimate(
        self,
        equation: IBMREquation,
        gender: Gender,
        weight_kg: float,
        height_cm: float,
        age_years: float,
        activity: ActivityFactor,
        deficit_kcal: float,
    ) -> EnergyEstimate:
        bmr = equation.calculate(gender, weight_kg, height_cm, age_years)
        tee = self.total_energy_expenditure(bmr, activity)
        return EnergyEstimate(
            bmr_kcal=bmr,
            tee_kcal=tee,
            estimated_kcal=tee - deficit_kcal,
        )

    def calculate(
        self,
        gender: Gender,
        actual_weight_kg: float,
        selected_weight_kg: float,
        height_cm: float,
        age_years: float,
        activity: ActivityFactor,
        deficit_kcal: float,
    ) -> Tuple[EquationResult, ...]:
        """Run every equation against the actual and the selected weight.

        Returns:
            One EquationResult per equation, in configuration order
        """
        results = []
        for equation in self._equations:
            results.append(
                EquationResult(
                    equation=equation.name,
                    actual=self.estimate(
                        equation,
                        gender,
                        actual_weight_kg,
                        height_cm,
                        age_years,
                        activity,
                        deficit_kcal,
                    ),
                    selected=self.estimate(
                        equation,
                        gender,
                        selected_weight_kg,
                        height_cm,
                        age_years,
                        activity,
                        deficit_kcal,
                    ),
                )
            )
        return tuple(results)
