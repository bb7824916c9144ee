"""
Domain Models for UniAssist

Pure Pydantic models with no framework dependencies.
Input models are frozen snapshots; they accept both snake_case names and
the camelCase keys used by the profile store and catalog feeds.
"""

from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TuitionPreference(str, Enum):
    """How much tuition the student is willing to pay."""
    FREE = "free"
    LOW_COST = "low-cost"
    ANY = "any"


class LearningStyle(str, Enum):
    """Preferred learning environment."""
    RESEARCH_ORIENTED = "research-oriented"
    HANDS_ON = "hands-on"
    MIXED = "mixed"


class TuitionRange(str, Enum):
    """Coarse tuition tier of a university."""
    FREE = "free"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class InternshipImportance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WorkPreference(str, Enum):
    INDUSTRY = "industry"
    ACADEMIA = "academia"
    BOTH = "both"


class StudyEnvironment(str, Enum):
    LARGE_UNIVERSITY = "large-university"
    SMALL_COLLEGE = "small-college"
    ANY = "any"


class RecordModel(BaseModel):
    """Base for immutable input records (profiles and catalog entries)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ============================================================================
# Student Profile
# ============================================================================

class BudgetRange(RecordModel):
    min: float = Field(..., ge=0)
    max: float = Field(..., ge=0)
    currency: str = "USD"


class LocationPreferences(RecordModel):
    climate: List[str] = Field(default_factory=list)
    city_size: Optional[str] = None
    campus_type: Optional[str] = None


class AcademicGoals(RecordModel):
    """Nested goals block of a student profile. Every field is optional."""
    career_path: List[str] = Field(default_factory=list)
    research_interests: List[str] = Field(default_factory=list)
    work_preference: Optional[WorkPreference] = None
    study_environment: Optional[StudyEnvironment] = None
    internship_importance: Optional[InternshipImportance] = None
    budget_range: Optional[BudgetRange] = None
    location_preferences: Optional[LocationPreferences] = None


class RoommatePreferences(RecordModel):
    """Housing preferences shared by students and roommate candidates."""
    rent_range: Optional[str] = None  # "$800 - $1200"
    move_in_date: Optional[str] = None
    location: Optional[str] = None
    room_type: Optional[str] = None
    cleanliness: Optional[str] = None


class StudentProfile(RecordModel):
    """
    Snapshot of a student's structured profile.

    Owned by the profile store; scorers only read it. Missing optional
    fields fall back to the defaults below and never raise.
    """
    gpa: Optional[float] = Field(None, ge=0.0, le=4.0, description="GPA on 4.0 scale")
    intended_major: str = ""
    preferred_regions: List[str] = Field(default_factory=list)
    tuition_preference: Optional[TuitionPreference] = None
    learning_style: Optional[LearningStyle] = None
    test_scores: Dict[str, float] = Field(default_factory=dict)
    academic_goals: AcademicGoals = Field(default_factory=AcademicGoals)

    # Mentor matching
    technical_interests: List[str] = Field(default_factory=list)
    program_preferences: List[str] = Field(default_factory=list)

    # Roommate matching
    interests: List[str] = Field(default_factory=list)
    target_universities: List[str] = Field(default_factory=list)
    living_preferences: List[str] = Field(default_factory=list)
    roommate_preferences: Optional[RoommatePreferences] = None

    # Profile strengths
    extracurriculars: List[str] = Field(default_factory=list)
    awards: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)

    @field_validator("intended_major", mode="before")
    @classmethod
    def strip_major(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator(
        "preferred_regions",
        "technical_interests",
        "program_preferences",
        "interests",
        "target_universities",
        "living_preferences",
        "extracurriculars",
        "awards",
        "strengths",
        mode="before",
    )
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("test_scores", mode="before")
    @classmethod
    def drop_empty_scores(cls, v):
        if isinstance(v, dict):
            return {test: score for test, score in v.items() if score is not None}
        return v


class ProfileUpdate(RecordModel):
    """Partial profile update. None means "not provided" and keeps the stored value."""
    gpa: Optional[float] = Field(None, ge=0.0, le=4.0)
    intended_major: Optional[str] = None
    preferred_regions: Optional[List[str]] = None
    tuition_preference: Optional[TuitionPreference] = None
    learning_style: Optional[LearningStyle] = None
    test_scores: Optional[Dict[str, float]] = None
    academic_goals: Optional[AcademicGoals] = None
    technical_interests: Optional[List[str]] = None
    program_preferences: Optional[List[str]] = None
    interests: Optional[List[str]] = None
    target_universities: Optional[List[str]] = None
    living_preferences: Optional[List[str]] = None
    roommate_preferences: Optional[RoommatePreferences] = None
    extracurriculars: Optional[List[str]] = None
    awards: Optional[List[str]] = None
    strengths: Optional[List[str]] = None


# ============================================================================
# Catalog Records
# ============================================================================

class ScoreRequirement(RecordModel):
    min: Optional[float] = None
    avg: Optional[float] = None


class AdmissionCriteria(RecordModel):
    min_gpa: Optional[float] = Field(None, alias="minGPA", ge=0.0, le=4.0)
    avg_gpa: Optional[float] = Field(None, alias="avgGPA", ge=0.0, le=4.0)
    acceptance_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    test_scores: Dict[str, ScoreRequirement] = Field(default_factory=dict)


class SuccessMetrics(RecordModel):
    graduation_rate: float = Field(0.0, ge=0.0, le=1.0)
    employment_rate: float = Field(0.0, ge=0.0, le=1.0)
    internship_rate: float = Field(0.0, ge=0.0, le=1.0)
    avg_starting_salary: Optional[float] = None
    research_opportunities: float = Field(0.0, ge=0.0, le=10.0)
    industry_connections: float = Field(0.0, ge=0.0, le=10.0)


class ProgramInfo(RecordModel):
    ranking: Optional[int] = None
    specializations: List[str] = Field(default_factory=list)
    research_areas: List[str] = Field(default_factory=list)
    success_rate: Optional[float] = None
    description: Optional[str] = None


class University(RecordModel):
    """Immutable university catalog record. name and country identify it."""
    name: str
    country: str
    ranking: Optional[int] = None
    programs: List[str] = Field(default_factory=list)
    research_focus: bool = False
    tuition_range: Optional[TuitionRange] = None
    admission_criteria: AdmissionCriteria = Field(default_factory=AdmissionCriteria)
    success_metrics: Optional[SuccessMetrics] = None
    strengths: List[str] = Field(default_factory=list)
    program_specific_info: Dict[str, ProgramInfo] = Field(default_factory=dict)
    campus_type: Optional[str] = None
    size: Optional[str] = None

    @field_validator("tuition_range", mode="before")
    @classmethod
    def normalize_tuition(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @field_validator("programs", "strengths", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("admission_criteria", "program_specific_info", mode="before")
    @classmethod
    def none_to_mapping(cls, v):
        return {} if v is None else v


class Mentor(RecordModel):
    name: str = ""
    field: str = ""
    expertise: List[str] = Field(default_factory=list)
    research_interests: List[str] = Field(default_factory=list)
    university: str = ""
    years_of_experience: int = 0
    available_for_mentoring: bool = True

    @field_validator("expertise", "research_interests", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v


class RoommateCandidate(RecordModel):
    name: str = ""
    target_universities: List[str] = Field(default_factory=list)
    major: str = ""
    interests: List[str] = Field(default_factory=list)
    living_preferences: List[str] = Field(default_factory=list)
    roommate_preferences: RoommatePreferences = Field(default_factory=RoommatePreferences)

    @field_validator("target_universities", "interests", "living_preferences", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("roommate_preferences", mode="before")
    @classmethod
    def none_to_preferences(cls, v):
        return {} if v is None else v


class ApplicationAnswers(RecordModel):
    """Free-text application answers. Blank means not answered."""
    goals: str = ""
    experience: str = ""
    achievements: str = ""
    extracurricular: str = ""

    @field_validator("goals", "experience", "achievements", "extracurricular", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


# ============================================================================
# Results
# ============================================================================

class MatchResult(BaseModel):
    """Scored outcome for one candidate. Created per call, owned by the caller."""
    overall_score: int = Field(..., ge=0, le=100)
    category_scores: Dict[str, int] = Field(default_factory=dict)
    reasons: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    admission_chance: Optional[int] = Field(None, ge=0, le=100)
    success_chance: Optional[int] = Field(None, ge=0, le=100)
    raw_score: Optional[float] = None

    @field_validator("category_scores")
    @classmethod
    def scores_in_range(cls, v: Dict[str, int]) -> Dict[str, int]:
        for category, score in v.items():
            if not 0 <= score <= 100:
                raise ValueError(f"category score {category}={score} outside 0-100")
        return v
