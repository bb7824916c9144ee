"""
Research Alignment Factor

Matches learning style against the university's research focus.
"""

from typing import Optional

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import LearningStyle, StudentProfile, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor


class ResearchAlignmentFactor(BaseScoringFactor):
    """
    Learning-style fit.
    
    Weight: 15% base
    
    research-oriented: 100 at research-focused universities, else 70
    hands-on: the reverse
    mixed or unset: configured baseline (80)
    """
    
    ALIGNED = 100.0
    MISALIGNED = 70.0
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
    
    @property
    def name(self) -> str:
        return "research_alignment"
    
    @property
    def base_weight(self) -> float:
        return 0.15
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        if profile.learning_style == LearningStyle.RESEARCH_ORIENTED:
            return self.ALIGNED if university.research_focus else self.MISALIGNED
        if profile.learning_style == LearningStyle.HANDS_ON:
            return self.MISALIGNED if university.research_focus else self.ALIGNED
        return self._settings.default_research_alignment
