# Scoring module for UniAssist
from uniassist.domain.scoring.interfaces import ScoringFactor, BaseScoringFactor
from uniassist.domain.scoring.primitives import (
    clamp,
    round_score,
    weighted_aggregate,
    partial_credit,
    unique_ordered,
)
from uniassist.domain.scoring.regions import RegionTable, default_region_table
from uniassist.domain.scoring.admission import AdmissionEstimator
from uniassist.domain.scoring.university_scorer import UniversityScorer, score_university
from uniassist.domain.scoring.mentor_scorer import MentorScorer, score_mentor
from uniassist.domain.scoring.roommate_scorer import RoommateScorer, score_roommate, parse_rent_range
from uniassist.domain.scoring.text_scoring import (
    TextScorer,
    TextRule,
    TextTier,
    KeywordTextScorer,
    DEFAULT_RULES,
)
from uniassist.domain.scoring.application_analyzer import (
    ApplicationStrengthAnalyzer,
    analysis_record,
    calculate_university_fit,
    score_application_strength,
)
from uniassist.domain.scoring.ranker import RankedCandidate, rank_candidates

__all__ = [
    "ScoringFactor",
    "BaseScoringFactor",
    "clamp",
    "round_score",
    "weighted_aggregate",
    "partial_credit",
    "unique_ordered",
    "RegionTable",
    "default_region_table",
    "AdmissionEstimator",
    "UniversityScorer",
    "score_university",
    "MentorScorer",
    "score_mentor",
    "RoommateScorer",
    "score_roommate",
    "parse_rent_range",
    "TextScorer",
    "TextRule",
    "TextTier",
    "KeywordTextScorer",
    "DEFAULT_RULES",
    "ApplicationStrengthAnalyzer",
    "analysis_record",
    "calculate_university_fit",
    "score_application_strength",
    "RankedCandidate",
    "rank_candidates",
]
