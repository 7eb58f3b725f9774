"""Calculator ports - interfaces for BMR equations."""

from abc import ABC, abstractmethod

from ..value_objects.gender import Gender


class IBMREquation(ABC):
    """Port for a predictive basal metabolic rate equation.

    Each implementation is an independent named strategy; the engine
    reports all of them side by side.
    """

    name: str

    @abstractmethod
    def calculate(
        self,
        gender: Gender,
        weight_kg: float,
        height_cm: float,
        age_years: float,
    ) -> float:
        """Calculate BMR in kcal/day.

        Args:
            gender: Selects sex-specific coefficients
            weight_kg: Weight basis
            height_cm: Height in centimeters
            age_years: Age in years

        Returns:
            float: BMR in kcal/day
        """
        pass
