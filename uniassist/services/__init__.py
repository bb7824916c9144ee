# Orchestration services
from uniassist.services.profile_service import ProfileService
from uniassist.services.matching_service import MatchingService

__all__ = ["ProfileService", "MatchingService"]
