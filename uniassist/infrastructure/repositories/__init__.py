# Profile repositories
from uniassist.infrastructure.repositories.profile_repository import (
    ProfileRepository,
    InMemoryProfileRepository,
)

__all__ = ["ProfileRepository", "InMemoryProfileRepository"]
