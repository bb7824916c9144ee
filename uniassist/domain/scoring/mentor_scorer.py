"""
Mentor Scorer

Scores how well a mentor fits a student's field and interests.
Only categories with data on both sides contribute to the weighting.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from uniassist.domain.models import MatchResult, Mentor, StudentProfile
from uniassist.domain.scoring.primitives import (
    clamp,
    contains_either,
    require_profile,
    round_score,
    unique_ordered,
)


logger = logging.getLogger(__name__)


def overlap_fraction(mentor_entries: Sequence[str], profile_entries: Iterable[str]) -> float:
    """
    Share of mentor entries that match any profile entry.
    
    Dividing by the mentor's own list means a broad mentor whose interests
    only partly overlap scores lower than a focused one.
    """
    mentor_entries = [m for m in mentor_entries if m.strip()]
    if not mentor_entries:
        return 0.0
    profile_entries = [p for p in profile_entries if p.strip()]
    matched = [
        entry for entry in mentor_entries
        if any(contains_either(entry, p) for p in profile_entries)
    ]
    return len(matched) / len(mentor_entries)


class MentorScorer:
    """
    Mentor compatibility scoring.
    
    Weights:
    - field_match: 35
    - research_interests: 25
    - expertise: 25
    - university_alignment: 15
    """
    
    WEIGHTS: Dict[str, float] = {
        "field_match": 35,
        "research_interests": 25,
        "expertise": 25,
        "university_alignment": 15,
    }
    
    def score(self, profile: StudentProfile, mentor: Mentor) -> MatchResult:
        profile = require_profile(profile)
        
        fractions: Dict[str, float] = {}
        reasons: List[str] = []
        
        if profile.intended_major and mentor.field:
            fractions["field_match"] = 1.0 if contains_either(mentor.field, profile.intended_major) else 0.0
            if fractions["field_match"]:
                reasons.append(f"Works in {mentor.field}, your intended field")
        
        student_research = list(profile.technical_interests) + list(profile.academic_goals.research_interests)
        if student_research and mentor.research_interests:
            fractions["research_interests"] = overlap_fraction(mentor.research_interests, student_research)
            if fractions["research_interests"] > 0:
                reasons.append("Shares your research interests")
        
        if profile.program_preferences and mentor.expertise:
            fractions["expertise"] = overlap_fraction(mentor.expertise, profile.program_preferences)
            if fractions["expertise"] > 0:
                reasons.append("Has expertise in programs you are considering")
        
        if profile.preferred_regions:
            institution = mentor.university.lower()
            aligned = any(
                region.strip() and region.strip().lower() in institution
                for region in profile.preferred_regions
            )
            fractions["university_alignment"] = 1.0 if aligned else 0.0
            if aligned:
                reasons.append(f"Based at {mentor.university}, in a region you prefer")
        
        total_weight = sum(self.WEIGHTS[c] for c in fractions)
        if total_weight:
            raw = sum(fraction * self.WEIGHTS[c] for c, fraction in fractions.items()) / total_weight * 100
        else:
            raw = 0.0
        
        return MatchResult(
            overall_score=round_score(clamp(raw)),
            category_scores={c: round_score(clamp(f * 100)) for c, f in fractions.items()},
            reasons=unique_ordered(reasons),
            raw_score=raw,
        )
    
    def score_mentors(self, profile: StudentProfile, mentors: Sequence[Mentor]) -> List[MatchResult]:
        results = [self.score(profile, mentor) for mentor in mentors]
        logger.debug(f"[SCORING] Scored {len(results)} mentors")
        return results


def score_mentor(profile: StudentProfile, mentor: Mentor) -> MatchResult:
    """Score one mentor; overall_score is the match score."""
    return MentorScorer().score(profile, mentor)
