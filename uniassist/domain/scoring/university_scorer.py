"""
University Scorer

Central scoring engine for university compatibility. Aggregates the
pluggable factor scores, estimates admission and success chances and
explains the result in short reason / strength / improvement strings.
"""

import logging
from typing import Dict, List, Optional, Sequence

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import (
    LearningStyle,
    MatchResult,
    StudentProfile,
    TuitionPreference,
    University,
)
from uniassist.domain.scoring.admission import AdmissionEstimator
from uniassist.domain.scoring.factors import (
    AcademicFitFactor,
    CareerAlignmentFactor,
    FinancialFitFactor,
    LocationMatchFactor,
    ProgramMatchFactor,
    ResearchAlignmentFactor,
)
from uniassist.domain.scoring.interfaces import ScoringFactor
from uniassist.domain.scoring.primitives import (
    clamp,
    require_profile,
    require_university,
    round_score,
    unique_ordered,
    weighted_aggregate,
)
from uniassist.domain.scoring.regions import RegionTable


logger = logging.getLogger(__name__)


class UniversityScorer:
    """
    University compatibility scoring engine.
    
    Uses Strategy pattern for pluggable factors. Weights are renormalized
    over the factors that apply to the profile.
    """
    
    def __init__(
        self,
        factors: Optional[Sequence[ScoringFactor]] = None,
        region_table: Optional[RegionTable] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize scorer with factors.
        
        Args:
            factors: Scoring factors. If None, uses the six default categories.
            region_table: Region lookup for the default location factor.
            settings: Tuning constants. Defaults to get_settings().
        """
        self._settings = settings or get_settings()
        self._factors = list(factors) if factors is not None else self._default_factors(region_table)
        self._admission = AdmissionEstimator(self._settings)
    
    def _default_factors(self, region_table: Optional[RegionTable]) -> List[ScoringFactor]:
        return [
            AcademicFitFactor(self._settings),
            ProgramMatchFactor(),
            LocationMatchFactor(region_table),
            ResearchAlignmentFactor(self._settings),
            CareerAlignmentFactor(self._settings),
            FinancialFitFactor(),
        ]
    
    @property
    def factors(self) -> List[ScoringFactor]:
        return list(self._factors)
    
    def score(self, profile: StudentProfile, university: University) -> MatchResult:
        """
        Score a single university for the student.
        
        Raises:
            ValidationError: profile absent, or university without name/country
        """
        profile = require_profile(profile)
        university = require_university(university)
        
        applicable = [f for f in self._factors if f.is_applicable(profile)]
        
        raw_scores: Dict[str, float] = {}
        for factor in applicable:
            raw_scores[factor.name] = factor.calculate(profile, university)
        
        weights = {f.name: f.base_weight for f in applicable}
        overall = weighted_aggregate(raw_scores, weights)
        
        category_scores = {
            name: round_score(clamp(value)) for name, value in raw_scores.items()
        }
        
        admission_chance = self._admission.admission_chance(profile, university)
        success_chance = self._admission.success_chance(
            raw_scores.get("academic_match", self._settings.default_academic_match),
            raw_scores.get("career_alignment", self._settings.default_career_alignment),
        )
        
        return MatchResult(
            overall_score=round_score(clamp(overall)),
            category_scores=category_scores,
            reasons=unique_ordered(self._reasons(profile, university, category_scores, overall)),
            strengths=unique_ordered(self._strengths(university, category_scores)),
            improvements=unique_ordered(self._improvements(profile, university, category_scores)),
            admission_chance=admission_chance,
            success_chance=success_chance,
        )
    
    def score_universities(
        self,
        profile: StudentProfile,
        universities: Sequence[University],
    ) -> List[MatchResult]:
        """Score each university in catalog order. Ranking is a separate step."""
        results = [self.score(profile, university) for university in universities]
        logger.debug(f"[SCORING] Scored {len(results)} universities")
        return results
    
    # ========================================================================
    # Explanations
    # ========================================================================
    
    def _reasons(
        self,
        profile: StudentProfile,
        university: University,
        scores: Dict[str, int],
        overall: int,
    ) -> List[str]:
        reasons: List[str] = []
        
        if overall >= 90:
            reasons.append("Exceptional alignment with your profile")
        elif overall >= 75:
            reasons.append("Strong overall alignment with your profile")
        
        academic = scores.get("academic_match")
        if academic is not None:
            if academic >= 90:
                reasons.append("Excellent academic match")
            elif academic >= 75:
                reasons.append("Strong academic match")
            elif academic >= 60:
                reasons.append("Good academic match")
        
        if scores.get("program_match") == 100 and profile.intended_major:
            reasons.append(f"Offers programs in {profile.intended_major}")
        
        if scores.get("location_match") == 100 and profile.preferred_regions:
            reasons.append("Located in your preferred region")
        
        if scores.get("research_alignment") == 100 and profile.learning_style in (
            LearningStyle.RESEARCH_ORIENTED, LearningStyle.HANDS_ON
        ):
            reasons.append(f"Matches your {profile.learning_style.value} learning style")
        
        financial = scores.get("financial_fit")
        if financial is not None:
            if profile.tuition_preference == TuitionPreference.FREE and financial == 100:
                reasons.append("Offers free tuition, matching your preference")
            elif profile.tuition_preference == TuitionPreference.LOW_COST and financial >= 90:
                reasons.append("Offers affordable tuition, matching your preference")
            elif profile.tuition_preference in (TuitionPreference.FREE, TuitionPreference.LOW_COST) and financial >= 60:
                reasons.append("Reasonable tuition costs")
        
        return reasons
    
    def _strengths(self, university: University, scores: Dict[str, int]) -> List[str]:
        strengths: List[str] = []
        
        if scores.get("career_alignment", 0) >= 80:
            strengths.append("Strong graduate employment and internship outcomes")
        
        metrics = university.success_metrics
        if metrics is not None:
            if metrics.research_opportunities >= 8:
                strengths.append("Extensive research opportunities")
            if metrics.industry_connections >= 8:
                strengths.append("Strong industry connections")
        
        strengths.extend(university.strengths)
        return strengths
    
    def _improvements(
        self,
        profile: StudentProfile,
        university: University,
        scores: Dict[str, int],
    ) -> List[str]:
        improvements: List[str] = []
        criteria = university.admission_criteria
        
        if profile.gpa is None:
            improvements.append("Add your GPA for a more accurate academic match")
        elif scores.get("academic_match", 100) < 60 and criteria.min_gpa is not None:
            improvements.append(
                f"Your GPA is below the minimum of {criteria.min_gpa:.1f}; strengthen other parts of your application"
            )
        elif scores.get("academic_match", 100) < 100 and criteria.avg_gpa is not None:
            improvements.append(f"Aim for a GPA closer to the average admit ({criteria.avg_gpa:.1f})")
        
        if scores.get("program_match", 100) < 100:
            if profile.intended_major:
                improvements.append("Check whether a closely related program fits your goals")
            else:
                improvements.append("Add your intended major for a program match")
        
        if scores.get("location_match", 100) < 100:
            improvements.append("Outside your preferred regions")
        
        if scores.get("financial_fit", 100) < 60:
            improvements.append("Tuition is above your preferred range; look into scholarships")
        
        for test, requirement in criteria.test_scores.items():
            if requirement.min is None:
                continue
            score = profile.test_scores.get(test)
            if score is None:
                improvements.append(f"Submit a {test} score (minimum {requirement.min:g})")
            elif score < requirement.min:
                improvements.append(f"Raise your {test} score above {requirement.min:g}")
        
        return improvements


def score_university(
    profile: StudentProfile,
    university: University,
    settings: Optional[Settings] = None,
) -> MatchResult:
    """Score one university with the default factors."""
    return UniversityScorer(settings=settings).score(profile, university)
