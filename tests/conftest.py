"""
Test configuration and fixtures for UniAssist.

Provides shared profiles, catalog records and settings for unit tests.
"""

import pytest

from uniassist.config.settings import Settings
from uniassist.domain.models import (
    AdmissionCriteria,
    Mentor,
    ProgramInfo,
    RoommateCandidate,
    RoommatePreferences,
    StudentProfile,
    SuccessMetrics,
    University,
)
from uniassist.domain.scoring.regions import RegionTable


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings with the documented defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def region_table():
    """Small explicit region table."""
    return RegionTable(
        {
            "North America": ["United States", "Canada"],
            "Europe": ["Germany", "Netherlands"],
            "Asia": ["Japan"],
        },
        version="test",
    )


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def cs_student():
    """Research-minded CS student: 3.95 GPA, North America, any tuition."""
    return StudentProfile(
        gpa=3.95,
        intended_major="Computer Science",
        preferred_regions=["North America"],
        tuition_preference="any",
        learning_style="research-oriented",
    )


@pytest.fixture
def empty_profile():
    """Profile with nothing filled in."""
    return StudentProfile()


@pytest.fixture
def roommate_profile():
    """Student looking for a roommate."""
    return StudentProfile(
        interests=["Programming", "AI", "Basketball"],
        target_universities=["Stanford University", "MIT", "Harvard University"],
        living_preferences=["Night Owl", "Social"],
        roommate_preferences=RoommatePreferences(
            rent_range="$800 - $1200",
            move_in_date="August 2024",
            location="Near Campus",
            room_type="Shared Room",
        ),
    )


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def selective_university():
    """Highly selective research university (min 3.9 / avg 4.0, 7% admit)."""
    return University(
        name="Selective Tech",
        country="United States",
        programs=["Computer Science", "Engineering"],
        research_focus=True,
        tuition_range="high",
        admission_criteria=AdmissionCriteria(min_gpa=3.9, avg_gpa=4.0, acceptance_rate=0.07),
        success_metrics=SuccessMetrics(
            employment_rate=0.95,
            internship_rate=0.90,
            industry_connections=9,
            research_opportunities=10,
        ),
        strengths=["Research", "Innovation"],
    )


@pytest.fixture
def free_university():
    """Tuition-free European university without success metrics."""
    return University(
        name="Free State University",
        country="Germany",
        programs=["Mathematics", "Physics"],
        research_focus=False,
        tuition_range="free",
        admission_criteria=AdmissionCriteria(min_gpa=3.0, avg_gpa=3.5, acceptance_rate=0.4),
        strengths=["Engineering Excellence", "Research", "Industry Connections"],
        program_specific_info={
            "Computer Science": ProgramInfo(description="robotics research"),
            "Physics": ProgramInfo(description="quantum computing"),
        },
    )


@pytest.fixture
def cs_mentor():
    return Mentor(
        name="Dr. Sarah Chen",
        university="Stanford University",
        field="Computer Science",
        expertise=["AI", "Machine Learning", "Data Science"],
        research_interests=["Deep Learning", "Computer Vision"],
        years_of_experience=8,
    )


@pytest.fixture
def matching_roommate():
    return RoommateCandidate(
        name="Alex Chen",
        major="Computer Science",
        interests=["Programming", "AI", "Basketball", "Photography"],
        living_preferences=["Night Owl", "No Smoking", "Social"],
        target_universities=["Stanford University", "MIT", "UC Berkeley"],
        roommate_preferences=RoommatePreferences(
            rent_range="$800 - $1200",
            move_in_date="August 2024",
            location="Near Campus",
            room_type="Shared Room",
        ),
    )
