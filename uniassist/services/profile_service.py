"""
Profile Service

Reads and saves student profiles through an injected ProfileRepository.
"""

import logging

from uniassist.domain.models import ProfileUpdate, StudentProfile
from uniassist.domain.profile import merge_profile, validate_profile
from uniassist.infrastructure.exceptions import NotFoundError
from uniassist.infrastructure.repositories import ProfileRepository


logger = logging.getLogger(__name__)


class ProfileService:
    """
    Service for managing student profiles.
    
    Handles:
    - Profile retrieval by user_id
    - Partial updates merged onto the stored profile
    - Save-time validation of required fields
    """
    
    def __init__(self, repository: ProfileRepository):
        self._repository = repository
    
    def get(self, user_id: str) -> StudentProfile:
        """
        Get a user's profile.
        
        Raises:
            NotFoundError: If the user has no profile
        """
        profile = self._repository.get(user_id)
        if profile is None:
            raise NotFoundError(
                f"No profile found for user {user_id}",
                resource="profile",
                identifier=user_id,
            )
        return profile
    
    def save(self, user_id: str, update: ProfileUpdate) -> StudentProfile:
        """
        Merge an update onto the stored profile, validate and persist it.
        
        Raises:
            ValidationError: If required fields are still missing after the merge
        """
        existing = self._repository.get(user_id)
        merged = validate_profile(merge_profile(existing, update))
        saved = self._repository.save(user_id, merged)
        logger.info(f"[PROFILE] Saved profile for {user_id} ({'updated' if existing else 'created'})")
        return saved
