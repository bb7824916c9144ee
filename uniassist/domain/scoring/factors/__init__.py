# University scoring factors
from uniassist.domain.scoring.factors.academic_fit import AcademicFitFactor, gpa_band
from uniassist.domain.scoring.factors.program_match import ProgramMatchFactor
from uniassist.domain.scoring.factors.location_match import LocationMatchFactor
from uniassist.domain.scoring.factors.learning_style import ResearchAlignmentFactor
from uniassist.domain.scoring.factors.career_alignment import CareerAlignmentFactor
from uniassist.domain.scoring.factors.financial_fit import FinancialFitFactor

__all__ = [
    "AcademicFitFactor",
    "ProgramMatchFactor",
    "LocationMatchFactor",
    "ResearchAlignmentFactor",
    "CareerAlignmentFactor",
    "FinancialFitFactor",
    "gpa_band",
]
