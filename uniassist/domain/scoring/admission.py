"""
Admission Estimator

Turns the GPA band likelihood into an institution-specific admission chance,
and combines academic and career scores into a success chance.
"""

from typing import Optional

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import StudentProfile, University
from uniassist.domain.scoring.factors.academic_fit import gpa_band
from uniassist.domain.scoring.primitives import clamp, round_score


class AdmissionEstimator:
    """
    Estimates admission and success chances for one university.
    
    A strong academic match still faces the university's own selectivity:
    the raw likelihood is scaled by acceptance_rate * multiplier and then
    bounded to [min_admission_chance, max_admission_chance].
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
    
    def raw_likelihood(self, profile: StudentProfile, university: University) -> float:
        """Likelihood from the GPA band alone, before selectivity scaling."""
        criteria = university.admission_criteria
        _, likelihood = gpa_band(
            profile.gpa, criteria.min_gpa, criteria.avg_gpa, self._settings
        )
        return likelihood
    
    def scale(self, likelihood: float, acceptance_rate: Optional[float]) -> int:
        """
        Apply selectivity scaling and bounds.
        
        Without an acceptance rate only the bounds apply.
        """
        if acceptance_rate is not None:
            likelihood = likelihood * acceptance_rate * self._settings.admission_rate_multiplier
        
        return round_score(clamp(
            likelihood,
            self._settings.min_admission_chance,
            self._settings.max_admission_chance,
        ))
    
    def admission_chance(self, profile: StudentProfile, university: University) -> int:
        likelihood = self.raw_likelihood(profile, university)
        return self.scale(likelihood, university.admission_criteria.acceptance_rate)
    
    @staticmethod
    def success_chance(academic_match: float, career_alignment: float) -> int:
        return round_score(clamp((academic_match + career_alignment) / 2))
