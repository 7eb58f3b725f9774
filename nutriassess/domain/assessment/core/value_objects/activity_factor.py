"""ActivityFactor value object - physical activity multiplier for TEE."""

from enum import Enum


class ActivityFactor(str, Enum):
    """Physical activity level applied to BMR.

    The calculator offers a fixed set of multipliers; UNSET (0) is the
    initial state and yields a zero total energy expenditure.
    """

    UNSET = "unset"
    MILD = "mild"
    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    HEAVY_ACTIVE = "heavy_active"

    def multiplier(self) -> float:
        """Get the BMR multiplier.

        Example:
            >>> ActivityFactor.MODERATE.multiplier()
            1.55
        """
        return _MULTIPLIERS[self]

    def description(self) -> str:
        """Human-readable label."""
        descriptions = {
            ActivityFactor.UNSET: "Select Activity Level",
            ActivityFactor.MILD: "Mild",
            ActivityFactor.SEDENTARY: "Sedentary",
            ActivityFactor.MODERATE: "Moderate",
            ActivityFactor.VERY_ACTIVE: "Very Active",
            ActivityFactor.HEAVY_ACTIVE: "Heavy Active",
        }
        return descriptions[self]

    @classmethod
    def parse(cls, raw: object) -> "ActivityFactor":
        """Parse an enum name or a numeric multiplier.

        Raises:
            InvalidEnumeratedValueError: If no option matches
        """
        from ..exceptions.domain_errors import InvalidEnumeratedValueError

        if isinstance(raw, ActivityFactor):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        try:
            value = float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InvalidEnumeratedValueError("activity factor", raw)
        for option, multiplier in _MULTIPLIERS.items():
            if multiplier == value:
                return option
        raise InvalidEnumeratedValueError("activity factor", raw)


_MULTIPLIERS = {
    ActivityFactor.UNSET: 0.0,
    ActivityFactor.MILD: 1.375,
    ActivityFactor.SEDENTARY: 1.5,
    ActivityFactor.MODERATE: 1.55,
    ActivityFactor.VERY_ACTIVE: 1.725,
    ActivityFactor.HEAVY_ACTIVE: 1.9,
}
