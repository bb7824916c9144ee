"""
Matching Service

Orchestrates recommendations: loads the profile, pulls candidates from the
catalog, scores every candidate and ranks the results. This is the only
layer that talks to the repository and the catalog.
"""

import logging
from typing import List, Optional

from uniassist.config.settings import Settings, get_settings
from uniassist.domain.models import (
    ApplicationAnswers,
    MatchResult,
    Mentor,
    RoommateCandidate,
    University,
)
from uniassist.domain.scoring import (
    ApplicationStrengthAnalyzer,
    MentorScorer,
    RankedCandidate,
    RegionTable,
    RoommateScorer,
    UniversityScorer,
    rank_candidates,
)
from uniassist.infrastructure.catalog import CatalogProvider
from uniassist.infrastructure.repositories import ProfileRepository
from uniassist.services.profile_service import ProfileService


logger = logging.getLogger(__name__)


class MatchingService:
    """
    Recommendation orchestration.
    
    Scorers are stateless, so one instance of each is shared across calls.
    """
    
    def __init__(
        self,
        repository: ProfileRepository,
        catalog: CatalogProvider,
        settings: Optional[Settings] = None,
        region_table: Optional[RegionTable] = None,
        university_scorer: Optional[UniversityScorer] = None,
        mentor_scorer: Optional[MentorScorer] = None,
        roommate_scorer: Optional[RoommateScorer] = None,
        analyzer: Optional[ApplicationStrengthAnalyzer] = None,
    ):
        self._settings = settings or get_settings()
        self._profiles = ProfileService(repository)
        self._catalog = catalog
        self._university_scorer = university_scorer or UniversityScorer(
            region_table=region_table, settings=self._settings
        )
        self._mentor_scorer = mentor_scorer or MentorScorer()
        self._roommate_scorer = roommate_scorer or RoommateScorer()
        self._analyzer = analyzer or ApplicationStrengthAnalyzer()
    
    def recommend_universities(
        self,
        user_id: str,
        limit: Optional[int] = None,
        min_score: Optional[int] = None,
    ) -> List[RankedCandidate[University]]:
        """
        Rank catalog universities for a user.
        
        Args:
            user_id: Profile owner
            limit: Defaults to settings.max_university_recommendations
            min_score: Defaults to settings.university_min_score
            
        Raises:
            NotFoundError: If the user has no profile
        """
        profile = self._profiles.get(user_id)
        universities = self._catalog.universities()
        
        logger.info(f"[MATCHING] Scoring {len(universities)} universities for {user_id}")
        
        scored = [(u, self._university_scorer.score(profile, u)) for u in universities]
        ranked = rank_candidates(
            scored,
            min_score=self._settings.university_min_score if min_score is None else min_score,
            limit=self._settings.max_university_recommendations if limit is None else limit,
        )
        
        logger.info(f"[MATCHING] {len(ranked)} universities recommended for {user_id}")
        return ranked
    
    def recommend_mentors(
        self,
        user_id: str,
        limit: Optional[int] = None,
        min_score: int = 0,
    ) -> List[RankedCandidate[Mentor]]:
        """Rank mentors who are available for mentoring."""
        profile = self._profiles.get(user_id)
        available = [m for m in self._catalog.mentors() if m.available_for_mentoring]
        
        logger.info(f"[MATCHING] Scoring {len(available)} available mentors for {user_id}")
        
        scored = [(m, self._mentor_scorer.score(profile, m)) for m in available]
        return rank_candidates(
            scored,
            min_score=min_score,
            limit=self._settings.max_mentor_recommendations if limit is None else limit,
        )
    
    def recommend_roommates(
        self,
        user_id: str,
        limit: Optional[int] = None,
        min_score: int = 0,
    ) -> List[RankedCandidate[RoommateCandidate]]:
        profile = self._profiles.get(user_id)
        candidates = self._catalog.roommates()
        
        logger.info(f"[MATCHING] Scoring {len(candidates)} roommate candidates for {user_id}")
        
        scored = [(c, self._roommate_scorer.score(profile, c)) for c in candidates]
        return rank_candidates(
            scored,
            min_score=min_score,
            limit=self._settings.max_roommate_recommendations if limit is None else limit,
        )
    
    def analyze_application(
        self,
        answers: ApplicationAnswers,
        university: Optional[University] = None,
    ) -> MatchResult:
        """Score application answers, optionally against a target university."""
        result = self._analyzer.analyze(answers, university)
        target = university.name if university else "no target university"
        logger.info(f"[ANALYSIS] Application strength {result.overall_score} ({target})")
        return result
