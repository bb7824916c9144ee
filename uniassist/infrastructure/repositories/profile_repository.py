"""
Profile Repository for UniAssist

Interface to the profile store plus a process-local implementation.
Services depend on ProfileRepository only, so a hosted store can be
plugged in without touching matching code.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional

from uniassist.domain.models import StudentProfile


logger = logging.getLogger(__name__)


class ProfileRepository(ABC):
    """Read/write access to student profiles keyed by user id."""
    
    @abstractmethod
    def get(self, user_id: str) -> Optional[StudentProfile]:
        """Get a profile, or None if the user has none."""
        pass
    
    @abstractmethod
    def save(self, user_id: str, profile: StudentProfile) -> StudentProfile:
        """Insert or replace a profile."""
        pass
    
    def exists(self, user_id: str) -> bool:
        return self.get(user_id) is not None


class InMemoryProfileRepository(ProfileRepository):
    """
    Dictionary-backed repository.
    
    Profiles are frozen models, so handing out the stored instance is safe.
    Nothing survives the process.
    """
    
    def __init__(self, profiles: Optional[Mapping[str, StudentProfile]] = None):
        self._profiles: Dict[str, StudentProfile] = dict(profiles or {})
    
    def get(self, user_id: str) -> Optional[StudentProfile]:
        return self._profiles.get(user_id)
    
    def save(self, user_id: str, profile: StudentProfile) -> StudentProfile:
        self._profiles[user_id] = profile
        logger.debug(f"[PROFILE] Stored profile for {user_id}")
        return profile
    
    def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None
    
    def user_ids(self) -> List[str]:
        return list(self._profiles)
