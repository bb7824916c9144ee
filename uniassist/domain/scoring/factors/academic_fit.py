"""
Academic Fit Factor

Positions the student's GPA inside the university's [minGPA, avgGPA] band.
The same band also yields the raw admission likelihood used by
AdmissionEstimator, so both numbers always move together.
"""

from typing import Optional, Tuple

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import StudentProfile, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor
from uniassist.domain.scoring.primitives import partial_credit


def gpa_band(
    gpa: Optional[float],
    min_gpa: Optional[float],
    avg_gpa: Optional[float],
    settings: Optional[Settings] = None,
) -> Tuple[float, float]:
    """
    Map a GPA onto (academic_match, admission_likelihood).
    
    - gpa >= avg: 100 / 90
    - min <= gpa < avg: 60 + p / 50 + p/2, p = percent of the way from min to avg
    - below min: tiered by gpa/min ratio, floor 20 / 10
    - gpa or min missing: configured defaults (70 / 60); a GPA of 0.0 is a real GPA
    
    An absent avg is treated as equal to min.
    """
    settings = settings or get_settings()
    
    if gpa is None or not min_gpa:
        return (
            settings.default_academic_match,
            settings.default_admission_likelihood,
        )
    
    avg = avg_gpa if avg_gpa is not None else min_gpa
    
    if gpa >= avg:
        return 100.0, 90.0
    
    if gpa >= min_gpa:
        # avg > gpa >= min here, so the band has positive width
        percent_in_range = (gpa - min_gpa) / (avg - min_gpa) * 100
        return (
            min(100.0, 60 + percent_in_range),
            min(90.0, 50 + percent_in_range / 2),
        )
    
    ratio = gpa / min_gpa
    return partial_credit(
        [
            (ratio > 0.7, (40.0, 30.0)),
            (ratio > 0.6, (30.0, 20.0)),
        ],
        floor=(20.0, 10.0),
    )


class AcademicFitFactor(BaseScoringFactor):
    """
    Academic match scoring factor.
    
    Weight: 25% base
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
    
    @property
    def name(self) -> str:
        return "academic_match"
    
    @property
    def base_weight(self) -> float:
        return 0.25
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        criteria = university.admission_criteria
        academic, _ = gpa_band(
            profile.gpa, criteria.min_gpa, criteria.avg_gpa, self._settings
        )
        return academic
