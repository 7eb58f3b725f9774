"""ChangeDuration value object - period of the recorded weight change."""

from enum import Enum


class ChangeDuration(str, Enum):
    """Period over which the usual-to-current weight change happened.

    Each option carries a unitless code that doubles as the weight-loss
    severity threshold (see BodyCompositionService.weight_loss_severity).
    """

    UNSET = "unset"
    WEEK = "week"
    ONE_MONTH = "one_month"
    THREE_MONTHS = "three_months"
    SIX_MONTHS = "six_months"
    ONE_YEAR = "one_year"

    def code(self) -> float:
        """Get the weighting code.

        Example:
            >>> ChangeDuration.THREE_MONTHS.code()
            7.5
        """
        return _CODES[self]

    @classmethod
    def parse(cls, raw: object) -> "ChangeDuration":
        """Parse an enum name or a numeric code.

        Raises:
            InvalidEnumeratedValueError: If no option matches
        """
        from ..exceptions.domain_errors import InvalidEnumeratedValueError

        if isinstance(raw, ChangeDuration):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        try:
            value = float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InvalidEnumeratedValueError("change duration", raw)
        for option, code in _CODES.items():
            if code == value:
                return option
        raise InvalidEnumeratedValueError("change duration", raw)


_CODES = {
    ChangeDuration.UNSET: 0.0,
    ChangeDuration.WEEK: 2.0,
    ChangeDuration.ONE_MONTH: 5.0,
    ChangeDuration.THREE_MONTHS: 7.5,
    ChangeDuration.SIX_MONTHS: 10.0,
    ChangeDuration.ONE_YEAR: 20.0,
}
