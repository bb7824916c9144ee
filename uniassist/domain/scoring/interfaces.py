"""
Scoring Interfaces for UniAssist

Protocols shared by the university scoring factors.
New factors plug into UniversityScorer without touching it.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from uniassist.domain.models import StudentProfile, University


@runtime_checkable
class ScoringFactor(Protocol):
    """
    Protocol for university scoring factors.
    
    Each factor produces an unrounded 0-100 score for one category.
    The scorer rounds and clamps before surfacing it.
    """
    
    @property
    def name(self) -> str:
        """Category key in MatchResult.category_scores."""
        ...
    
    @property
    def base_weight(self) -> float:
        """Static weight before renormalization."""
        ...
    
    def is_applicable(self, profile: StudentProfile) -> bool:
        """Check if this factor applies to the student."""
        ...
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        """
        Calculate score for this factor.
        
        Returns: Score from 0-100
        """
        ...


class BaseScoringFactor(ABC):
    """Base class for scoring factors with common functionality."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        pass
    
    @property
    @abstractmethod
    def base_weight(self) -> float:
        pass
    
    def is_applicable(self, profile: StudentProfile) -> bool:
        """Default: always applicable. Override for optional factors."""
        return True
    
    @abstractmethod
    def calculate(self, profile: StudentProfile, university: University) -> float:
        pass
