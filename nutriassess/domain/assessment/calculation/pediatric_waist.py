"""Pediatric waist circumference percentile reference.

Static reference data keyed by (gender, integer age 2-18). Values are
10th, 50th and 90th percentile waist circumferences in cm from the
NHANES III based reference of Fernandez et al. (J Pediatr 2004;145:439-44),
European-American children. Ages are never interpolated.
"""

from typing import Dict, Optional

from ..core.exceptions.domain_errors import PediatricReferenceNotFoundError
from ..core.value_objects.classification import (
    PediatricWaistReference,
    WaistPercentiles,
)
from ..core.value_objects.gender import Gender

MIN_AGE = 2
MAX_AGE = 18

_BOYS: Dict[int, WaistPercentiles] = {
    2: WaistPercentiles(p10=43.2, p50=47.1, p90=50.8),
    3: WaistPercentiles(p10=44.9, p50=49.1, p90=54.2),
    4: WaistPercentiles(p10=46.6, p50=51.1, p90=57.6),
    5: WaistPercentiles(p10=48.4, p50=53.2, p90=61.0),
    6: WaistPercentiles(p10=50.1, p50=55.2, p90=64.4),
    7: WaistPercentiles(p10=51.8, p50=57.2, p90=67.8),
    8: WaistPercentiles(p10=53.5, p50=59.3, p90=71.2),
    9: WaistPercentiles(p10=55.3, p50=61.3, p90=74.6),
    10: WaistPercentiles(p10=57.0, p50=63.3, p90=78.0),
    11: WaistPercentiles(p10=58.7, p50=65.4, p90=81.4),
    12: WaistPercentiles(p10=60.5, p50=67.4, p90=84.8),
    13: WaistPercentiles(p10=62.2, p50=69.5, p90=88.2),
    14: WaistPercentiles(p10=63.9, p50=71.5, p90=91.6),
    15: WaistPercentiles(p10=65.6, p50=73.5, p90=95.0),
    16: WaistPercentiles(p10=67.4, p50=75.6, p90=98.4),
    17: WaistPercentiles(p10=69.1, p50=77.6, p90=101.8),
    18: WaistPercentiles(p10=70.8, p50=79.6, p90=105.2),
}

_GIRLS: Dict[int, WaistPercentiles] = {
    2: WaistPercentiles(p10=43.8, p50=47.1, p90=52.2),
    3: WaistPercentiles(p10=45.0, p50=48.9, p90=55.3),
    4: WaistPercentiles(p10=46.3, p50=50.8, p90=58.3),
    5: WaistPercentiles(p10=47.5, p50=52.7, p90=61.4),
    6: WaistPercentiles(p10=48.8, p50=54.6, p90=64.4),
    7: WaistPercentiles(p10=50.0, p50=56.5, p90=67.5),
    8: WaistPercentiles(p10=51.2, p50=58.4, p90=70.5),
    9: WaistPercentiles(p10=52.5, p50=60.3, p90=73.6),
    10: WaistPercentiles(p10=53.7, p50=62.2, p90=76.6),
    11: WaistPercentiles(p10=55.0, p50=64.1, p90=79.7),
    12: WaistPercentiles(p10=56.2, p50=66.0, p90=82.7),
    13: WaistPercentiles(p10=57.5, p50=67.9, p90=85.8),
    14: WaistPercentiles(p10=58.7, p50=69.8, p90=88.8),
    15: WaistPercentiles(p10=59.9, p50=71.7, p90=91.9),
    16: WaistPercentiles(p10=61.2, p50=73.6, p90=94.9),
    17: WaistPercentiles(p10=62.4, p50=75.5, p90=98.0),
    18: WaistPercentiles(p10=63.7, p50=77.4, p90=101.0),
}

_TABLES = {Gender.MALE: _BOYS, Gender.FEMALE: _GIRLS}


def waist_percentiles(gender: Gender, age_years: float) -> WaistPercentiles:
    """Look up the percentile triple for a child.

    The age is truncated to whole years.

    Raises:
        PediatricReferenceNotFoundError: If the age is outside 2-18
    """
    age = int(age_years)
    table = _TABLES[gender]
    if age not in table:
        raise PediatricReferenceNotFoundError(gender.value, age_years)
    return table[age]


def pediatric_waist_reference(
    gender: Gender, age_years: float, waist_cm: float = 0.0
) -> Optional[PediatricWaistReference]:
    """Reference for display next to a measured waist.

    Returns None outside the 2-18 year range. `elevated` flags a waist
    above the 90th percentile.
    """
    if not MIN_AGE <= int(age_years) <= MAX_AGE:
        return None
    percentiles = waist_percentiles(gender, age_years)
    return PediatricWaistReference(
        gender=gender,
        age_years=int(age_years),
        percentiles=percentiles,
        waist_cm=waist_cm,
        elevated=waist_cm > percentiles.p90,
    )
