"""
Roommate Scorer

Additive compatibility points between a student and a roommate candidate.
"""

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from uniassist.domain.models import MatchResult, RoommateCandidate, RoommatePreferences, StudentProfile
from uniassist.domain.scoring.primitives import clamp, require_profile, round_score


logger = logging.getLogger(__name__)


_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def parse_rent_range(text: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Parse "$800 - $1,200" into (800.0, 1200.0).
    
    Returns None unless at least two numbers are present.
    """
    if not text:
        return None
    numbers = [float(n) for n in _NUMBER.findall(text.replace(",", ""))]
    if len(numbers) < 2:
        return None
    low, high = numbers[0], numbers[1]
    return min(low, high), max(low, high)


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def _same(a: Optional[str], b: Optional[str]) -> bool:
    """Exact match only counts when both sides gave a value."""
    return bool(_norm(a)) and _norm(a) == _norm(b)


def _shared(a: Sequence[str], b: Sequence[str]) -> int:
    theirs = {_norm(item) for item in b if _norm(item)}
    return len({_norm(item) for item in a if _norm(item)} & theirs)


class RoommateScorer:
    """
    Roommate compatibility scoring.
    
    Points:
    - any shared target university: 30
    - each shared lifestyle tag: 10
    - each shared interest: 5
    - overlapping rent ranges: 15
    - same move-in date: 10
    - same location: 5
    - same room type: 5
    """
    
    SCHOOL_POINTS = 30
    LIFESTYLE_POINTS = 10
    INTEREST_POINTS = 5
    RENT_POINTS = 15
    MOVE_IN_POINTS = 10
    LOCATION_POINTS = 5
    ROOM_TYPE_POINTS = 5
    
    def score(self, profile: StudentProfile, candidate: RoommateCandidate) -> MatchResult:
        profile = require_profile(profile)
        mine = profile.roommate_preferences or RoommatePreferences()
        theirs = candidate.roommate_preferences
        
        points: Dict[str, int] = {
            "target_universities": (
                self.SCHOOL_POINTS
                if _shared(candidate.target_universities, profile.target_universities)
                else 0
            ),
            "living_preferences": self.LIFESTYLE_POINTS * _shared(
                candidate.living_preferences, profile.living_preferences
            ),
            "interests": self.INTEREST_POINTS * _shared(candidate.interests, profile.interests),
            "rent_range": self.RENT_POINTS if self._rent_overlaps(mine, theirs) else 0,
            "move_in_date": self.MOVE_IN_POINTS if _same(mine.move_in_date, theirs.move_in_date) else 0,
            "location": self.LOCATION_POINTS if _same(mine.location, theirs.location) else 0,
            "room_type": self.ROOM_TYPE_POINTS if _same(mine.room_type, theirs.room_type) else 0,
        }
        
        raw = sum(points.values())
        # raw_score keeps the unclamped sum for tie-breaking
        overall = clamp(raw)
        
        return MatchResult(
            overall_score=round_score(overall),
            category_scores={k: int(clamp(v)) for k, v in points.items()},
            raw_score=float(raw),
        )
    
    @staticmethod
    def _rent_overlaps(mine: RoommatePreferences, theirs: RoommatePreferences) -> bool:
        a = parse_rent_range(mine.rent_range)
        b = parse_rent_range(theirs.rent_range)
        if a is None or b is None:
            return False
        return a[1] >= b[0] and a[0] <= b[1]
    
    def score_candidates(
        self,
        profile: StudentProfile,
        candidates: Sequence[RoommateCandidate],
    ) -> List[MatchResult]:
        results = [self.score(profile, candidate) for candidate in candidates]
        logger.debug(f"[SCORING] Scored {len(results)} roommate candidates")
        return results


def score_roommate(profile: StudentProfile, candidate: RoommateCandidate) -> MatchResult:
    """Score one roommate candidate; overall_score is the compatibility score."""
    return RoommateScorer().score(profile, candidate)
