"""
Financial Fit Factor

Tiered lookup of tuition preference against the university's tuition range.
"""

from typing import Dict, Optional

from uniassist.domain.models import StudentProfile, TuitionPreference, TuitionRange, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor


class FinancialFitFactor(BaseScoringFactor):
    """
    Financial fit scoring factor.
    
    Weight: 10% base
    
    free:      free 100, low 80, moderate 60, anything else 40
    low-cost:  free 100, low 90, moderate 80, anything else 60
    any/unset: 100
    """
    
    TABLE: Dict[TuitionPreference, Dict[Optional[TuitionRange], float]] = {
        TuitionPreference.FREE: {
            TuitionRange.FREE: 100.0,
            TuitionRange.LOW: 80.0,
            TuitionRange.MODERATE: 60.0,
        },
        TuitionPreference.LOW_COST: {
            TuitionRange.FREE: 100.0,
            TuitionRange.LOW: 90.0,
            TuitionRange.MODERATE: 80.0,
        },
    }
    
    FALLBACK: Dict[TuitionPreference, float] = {
        TuitionPreference.FREE: 40.0,
        TuitionPreference.LOW_COST: 60.0,
    }
    
    @property
    def name(self) -> str:
        return "financial_fit"
    
    @property
    def base_weight(self) -> float:
        return 0.10
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        preference = profile.tuition_preference
        if preference not in self.TABLE:
            return 100.0
        
        return self.TABLE[preference].get(
            university.tuition_range, self.FALLBACK[preference]
        )
