"""
Unit tests for profile helpers.

Tests merge semantics, save-time validation, completeness and
strength / improvement summaries.
"""

import pytest

from uniassist.domain.models import (
    AcademicGoals,
    LearningStyle,
    ProfileUpdate,
    StudentProfile,
    TuitionPreference,
)
from uniassist.domain.profile import (
    goal_field_count,
    improvement_areas,
    merge_profile,
    profile_completeness,
    profile_strengths,
    validate_profile,
)
from uniassist.infrastructure.exceptions import ValidationError


@pytest.fixture
def complete_profile():
    return StudentProfile(
        gpa=3.8,
        intended_major="Computer Science",
        preferred_regions=["Europe"],
        tuition_preference="free",
        learning_style="hands-on",
        test_scores={"SAT": 1450},
        academic_goals=AcademicGoals(
            career_path=["Engineer"],
            research_interests=["Robotics"],
            work_preference="industry",
            internship_importance="high",
        ),
        interests=["Robotics", "Chess", "Music"],
        extracurriculars=["Robotics Club", "Chess", "Choir"],
        awards=["Science Fair"],
        strengths=["Persistence"],
    )


class TestMergeProfile:
    """Tests for partial-update merging."""
    
    def test_none_keeps_stored_value(self, complete_profile):
        merged = merge_profile(complete_profile, ProfileUpdate(gpa=3.9))
        assert merged.gpa == 3.9
        assert merged.intended_major == "Computer Science"
        assert merged.preferred_regions == ["Europe"]
    
    def test_empty_list_overrides(self, complete_profile):
        merged = merge_profile(complete_profile, ProfileUpdate(preferred_regions=[]))
        assert merged.preferred_regions == []
    
    def test_academic_goals_merge_field_by_field(self, complete_profile):
        update = ProfileUpdate(academic_goals=AcademicGoals(study_environment="small-college"))
        merged = merge_profile(complete_profile, update)
        
        assert merged.academic_goals.study_environment.value == "small-college"
        assert merged.academic_goals.career_path == ["Engineer"]
        assert merged.academic_goals.work_preference.value == "industry"
    
    def test_merge_onto_nothing(self):
        merged = merge_profile(None, ProfileUpdate(intended_major="Physics", learning_style="mixed"))
        assert merged.intended_major == "Physics"
        assert merged.learning_style == LearningStyle.MIXED
        assert merged.gpa is None
    
    def test_accepts_camel_case_update(self, complete_profile):
        update = ProfileUpdate.model_validate({"tuitionPreference": "low-cost"})
        merged = merge_profile(complete_profile, update)
        assert merged.tuition_preference == TuitionPreference.LOW_COST
    
    def test_base_is_not_mutated(self, complete_profile):
        merge_profile(complete_profile, ProfileUpdate(gpa=2.0))
        assert complete_profile.gpa == 3.8


class TestValidateProfile:
    """Tests for save-time validation."""
    
    def test_complete_profile_passes(self, complete_profile):
        assert validate_profile(complete_profile) is complete_profile
    
    def test_lists_every_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile(StudentProfile(gpa=3.2, preferred_regions=[]))
        
        assert exc_info.value.details["missing_fields"] == [
            "intended_major",
            "preferred_regions",
            "tuition_preference",
            "learning_style",
        ]
        assert "Missing required fields" in exc_info.value.message


class TestCompleteness:
    """Tests for profile completeness percentage."""
    
    def test_empty_profile(self, empty_profile):
        assert profile_completeness(empty_profile) == 0
    
    def test_full_profile(self, complete_profile):
        assert profile_completeness(complete_profile) == 100
    
    def test_required_only(self):
        profile = StudentProfile(
            gpa=3.0,
            intended_major="Art",
            preferred_regions=["Asia"],
            tuition_preference="any",
            learning_style="mixed",
        )
        # 5 of 11 fields
        assert profile_completeness(profile) == 45


class TestStrengthsAndImprovements:
    """Tests for profile strength and improvement rules."""
    
    def test_goal_field_count(self, complete_profile, empty_profile):
        assert goal_field_count(complete_profile.academic_goals) == 4
        assert goal_field_count(empty_profile.academic_goals) == 0
    
    def test_strong_profile(self, complete_profile):
        assert profile_strengths(complete_profile) == [
            "Strong Academic Performance",
            "Excellent SAT Score",
            "Strong Extracurricular Involvement",
            "Academic/Extra-curricular Achievements",
            "Clear Academic Goals",
        ]
        assert improvement_areas(complete_profile) == []
    
    def test_weak_profile(self):
        profile = StudentProfile(gpa=2.7, test_scores={"ACT": 31}, interests=["Art"])
        assert profile_strengths(profile) == ["Excellent ACT Score"]
        assert improvement_areas(profile) == [
            "Consider improving academic performance",
            "Add more extracurricular activities",
            "Define academic goals more clearly",
            "Add more academic interests",
        ]
    
    def test_missing_tests(self, empty_profile):
        assert "Consider taking SAT or ACT" in improvement_areas(empty_profile)
