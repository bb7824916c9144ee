"""
Profile Helpers

Partial-update merging, save-time validation and the completeness and
strength summaries shown next to a student's profile.
"""

from typing import Any, Dict, List, Optional

from uniassist.domain.models import AcademicGoals, ProfileUpdate, StudentProfile
from uniassist.domain.scoring.primitives import round_score
from uniassist.infrastructure.exceptions import ValidationError


REQUIRED_FIELDS = (
    "gpa",
    "intended_major",
    "preferred_regions",
    "tuition_preference",
    "learning_style",
)

OPTIONAL_FIELDS = (
    "test_scores",
    "academic_goals",
    "interests",
    "strengths",
    "extracurriculars",
    "awards",
)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, AcademicGoals):
        return goal_field_count(value) > 0
    if isinstance(value, (str, list, dict)):
        return len(value) > 0
    return True


def goal_field_count(goals: Optional[AcademicGoals]) -> int:
    """Number of academic goal fields the student has filled in."""
    if goals is None:
        return 0
    return sum(1 for name in AcademicGoals.model_fields if _is_present(getattr(goals, name)))


def merge_profile(base: Optional[StudentProfile], update: ProfileUpdate) -> StudentProfile:
    """
    Overlay the provided fields of an update onto a stored profile.
    
    None in the update means "not provided" and keeps the stored value;
    an explicit empty list replaces it. academic_goals is merged field by
    field, using only the goal fields the update actually set.
    """
    merged: Dict[str, Any] = base.model_dump() if base is not None else {}
    
    changes = update.model_dump(exclude_none=True, exclude={"academic_goals"})
    merged.update(changes)
    
    if update.academic_goals is not None:
        goals = dict(merged.get("academic_goals") or {})
        goals.update(update.academic_goals.model_dump(exclude_unset=True, exclude_none=True))
        merged["academic_goals"] = goals
    
    return StudentProfile.model_validate(merged)


def missing_required_fields(profile: StudentProfile) -> List[str]:
    return [name for name in REQUIRED_FIELDS if not _is_present(getattr(profile, name))]


def validate_profile(profile: StudentProfile) -> StudentProfile:
    """
    Check a profile is complete enough to save.
    
    Raises:
        ValidationError: listing every missing required field
    """
    missing = missing_required_fields(profile)
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            missing_fields=missing,
        )
    return profile


def profile_completeness(profile: StudentProfile) -> int:
    """Percentage of the required and optional fields that are filled in."""
    fields = REQUIRED_FIELDS + OPTIONAL_FIELDS
    filled = sum(1 for name in fields if _is_present(getattr(profile, name)))
    return round_score(filled / len(fields) * 100)


def profile_strengths(profile: StudentProfile) -> List[str]:
    strengths: List[str] = []
    scores = profile.test_scores
    
    if profile.gpa is not None and profile.gpa >= 3.5:
        strengths.append("Strong Academic Performance")
    if scores.get("SAT", 0) >= 1400:
        strengths.append("Excellent SAT Score")
    if scores.get("ACT", 0) >= 30:
        strengths.append("Excellent ACT Score")
    if len(profile.extracurriculars) >= 3:
        strengths.append("Strong Extracurricular Involvement")
    if profile.awards:
        strengths.append("Academic/Extra-curricular Achievements")
    if goal_field_count(profile.academic_goals) >= 4:
        strengths.append("Clear Academic Goals")
    
    return strengths


def improvement_areas(profile: StudentProfile) -> List[str]:
    improvements: List[str] = []
    
    if profile.gpa is not None and profile.gpa < 3.0:
        improvements.append("Consider improving academic performance")
    if not profile.test_scores.get("SAT") and not profile.test_scores.get("ACT"):
        improvements.append("Consider taking SAT or ACT")
    if len(profile.extracurriculars) < 2:
        improvements.append("Add more extracurricular activities")
    if goal_field_count(profile.academic_goals) < 3:
        improvements.append("Define academic goals more clearly")
    if len(profile.interests) < 3:
        improvements.append("Add more academic interests")
    
    return improvements
