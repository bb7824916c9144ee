"""
Unit tests for the matching orchestration service.
"""

import pytest

from uniassist.config.settings import Settings
from uniassist.domain.models import ApplicationAnswers, Mentor, ProfileUpdate
from uniassist.infrastructure.catalog import StaticCatalog
from uniassist.infrastructure.exceptions import NotFoundError, ValidationError
from uniassist.infrastructure.repositories import InMemoryProfileRepository
from uniassist.services import MatchingService, ProfileService


@pytest.fixture
def repository(cs_student, roommate_profile):
    return InMemoryProfileRepository({"student": cs_student, "roomie": roommate_profile})


@pytest.fixture
def catalog(selective_university, free_university, cs_mentor, matching_roommate):
    busy = Mentor(name="Busy Mentor", field="Computer Science", available_for_mentoring=False)
    return StaticCatalog(
        universities=[free_university, selective_university],
        mentors=[busy, cs_mentor],
        roommates=[matching_roommate],
    )


@pytest.fixture
def service(repository, catalog, region_table, test_settings):
    return MatchingService(repository, catalog, settings=test_settings, region_table=region_table)


class TestMatchingService:
    """Tests for MatchingService."""
    
    def test_recommend_universities_ranks_by_score(self, service):
        ranked = service.recommend_universities("student")
        
        assert [r.candidate.name for r in ranked] == ["Selective Tech", "Free State University"]
        assert ranked[0].rank == 1
        assert ranked[0].result.admission_chance == 8
    
    def test_recommend_universities_cutoff_and_limit(self, service):
        assert service.recommend_universities("student", min_score=100) == []
        assert len(service.recommend_universities("student", limit=1)) == 1
    
    def test_default_limit_comes_from_settings(self, repository, catalog, region_table):
        settings = Settings(_env_file=None, max_university_recommendations=1)
        service = MatchingService(repository, catalog, settings=settings, region_table=region_table)
        assert len(service.recommend_universities("student")) == 1
    
    def test_unavailable_mentors_are_filtered(self, service):
        ranked = service.recommend_mentors("student")
        assert [r.candidate.name for r in ranked] == ["Dr. Sarah Chen"]
        assert ranked[0].result.overall_score == 70
    
    def test_recommend_roommates(self, service):
        ranked = service.recommend_roommates("roomie")
        assert ranked[0].candidate.name == "Alex Chen"
        assert ranked[0].result.overall_score == 100
    
    def test_unknown_user(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.recommend_universities("ghost")
        assert exc_info.value.details == {"resource": "profile", "id": "ghost"}
    
    def test_analyze_application(self, service, free_university):
        result = service.analyze_application(
            ApplicationAnswers(goals="I plan to pursue research with engineering excellence at university."),
            free_university,
        )
        assert result.overall_score == 56


class TestProfileService:
    """Tests for ProfileService."""
    
    def test_get_missing_profile(self):
        with pytest.raises(NotFoundError):
            ProfileService(InMemoryProfileRepository()).get("nobody")
    
    def test_save_creates_complete_profile(self):
        repository = InMemoryProfileRepository()
        service = ProfileService(repository)
        
        saved = service.save("new", ProfileUpdate(
            gpa=3.4,
            intended_major="Biology",
            preferred_regions=["Europe"],
            tuition_preference="free",
            learning_style="hands-on",
        ))
        
        assert repository.get("new") == saved
        assert service.get("new").intended_major == "Biology"
    
    def test_save_merges_onto_existing(self, repository):
        service = ProfileService(repository)
        saved = service.save("student", ProfileUpdate(gpa=3.5))
        
        assert saved.gpa == 3.5
        assert saved.intended_major == "Computer Science"
    
    def test_incomplete_profile_is_not_saved(self):
        repository = InMemoryProfileRepository()
        
        with pytest.raises(ValidationError):
            ProfileService(repository).save("new", ProfileUpdate(gpa=3.4))
        assert repository.get("new") is None
