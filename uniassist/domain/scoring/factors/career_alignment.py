"""
Career Alignment Factor

Scores graduate outcomes: employment, internships and industry ties.
"""

from typing import Optional

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import StudentProfile, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor
from uniassist.domain.scoring.primitives import round_score


class CareerAlignmentFactor(BaseScoringFactor):
    """
    Career alignment scoring factor.
    
    Weight: 10% base
    
    round(employment*100*0.4 + internship*100*0.4 + industry_connections*10*0.2)
    Falls back to the configured default (80) without success metrics.
    """
    
    EMPLOYMENT_WEIGHT = 0.4
    INTERNSHIP_WEIGHT = 0.4
    INDUSTRY_WEIGHT = 0.2
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
    
    @property
    def name(self) -> str:
        return "career_alignment"
    
    @property
    def base_weight(self) -> float:
        return 0.10
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        metrics = university.success_metrics
        if metrics is None:
            return self._settings.default_career_alignment
        
        return float(round_score(
            metrics.employment_rate * 100 * self.EMPLOYMENT_WEIGHT
            + metrics.internship_rate * 100 * self.INTERNSHIP_WEIGHT
            + metrics.industry_connections * 10 * self.INDUSTRY_WEIGHT
        ))
