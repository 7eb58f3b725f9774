"""Gender value object - selects sex-specific formula coefficients."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the predictive equations and waist bands."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, raw: object) -> "Gender":
        """Parse a raw gender value.

        Accepts the enum itself, 'male'/'female' and the short forms
        'M'/'F' in any case.

        Raises:
            InvalidEnumeratedValueError: If the value is not recognised
        """
        from ..exceptions.domain_errors import InvalidEnumeratedValueError

        if isinstance(raw, Gender):
            return raw
        if isinstance(raw, str):
            key = raw.strip().lower()
            aliases = {
                "male": cls.MALE,
                "m": cls.MALE,
                "female": cls.FEMALE,
                "f": cls.FEMALE,
            }
            if key in aliases:
                return aliases[key]
        raise InvalidEnumeratedValueError("gender", raw)

    def abw_multiplier(self) -> float:
        """Get the adjusted body weight multiplier.

        Example:
            >>> Gender.MALE.abw_multiplier()
            0.38
        """
        return 0.38 if self is Gender.MALE else 0.32
