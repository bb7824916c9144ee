"""
Application Settings for UniAssist

Centralized configuration using Pydantic Settings with .env support.
Scoring defaults for incomplete profiles live here so they can be tuned
without touching scorer code.
"""

from functools import lru_cache
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (UNIASSIST_ prefix).
    
    The "default_*" values are the benefit-of-the-doubt scores used when
    a profile or catalog record lacks the data a category needs.
    """
    
    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    
    # Partial-credit defaults (0-100)
    default_academic_match: float = 70.0
    default_admission_likelihood: float = 60.0
    default_research_alignment: float = 80.0
    default_career_alignment: float = 80.0
    
    # Admission likelihood tuning
    admission_rate_multiplier: float = 1.5
    min_admission_chance: float = 5.0
    max_admission_chance: float = 95.0
    
    # Ranking
    university_min_score: int = 20
    max_university_recommendations: int = 10
    max_mentor_recommendations: int = 3
    max_roommate_recommendations: int = 10
    
    model_config = SettingsConfigDict(
        env_prefix="UNIASSIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    @model_validator(mode="after")
    def validate_bounds(self) -> "Settings":
        """Reject inconsistent admission bounds and score defaults."""
        if not 0 <= self.min_admission_chance <= self.max_admission_chance <= 100:
            raise ValueError(
                "admission chance bounds must satisfy 0 <= min <= max <= 100"
            )
        
        for name in (
            "default_academic_match",
            "default_admission_likelihood",
            "default_research_alignment",
            "default_career_alignment",
        ):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
        
        if self.admission_rate_multiplier <= 0:
            raise ValueError("admission_rate_multiplier must be positive")
        
        return self
    
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"
    
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
