"""
Program Match Factor

Checks whether the university offers something close to the intended major.
"""

from uniassist.domain.models import StudentProfile, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor
from uniassist.domain.scoring.primitives import contains_either, partial_credit


class ProgramMatchFactor(BaseScoringFactor):
    """
    Program match scoring factor.
    
    Weight: 25% base
    
    100 when any program name contains the major or the major contains it
    (case-insensitive), otherwise partial credit of 50. A blank major or a
    blank program name never counts as a match.
    """
    
    MATCH_SCORE = 100.0
    PARTIAL_CREDIT = 50.0
    
    @property
    def name(self) -> str:
        return "program_match"
    
    @property
    def base_weight(self) -> float:
        return 0.25
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        major = profile.intended_major
        return partial_credit(
            [(lambda: any(contains_either(p, major) for p in university.programs), self.MATCH_SCORE)],
            floor=self.PARTIAL_CREDIT,
        )
