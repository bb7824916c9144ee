"""
Unit tests for application strength analysis.

Covers the keyword text scorers, the achievements bonus,
university fit and the aggregated result.
"""

import pytest

from uniassist.domain.models import ApplicationAnswers, University
from uniassist.domain.scoring import (
    ApplicationStrengthAnalyzer,
    KeywordTextScorer,
    TextRule,
    TextTier,
    analysis_record,
    calculate_university_fit,
    score_application_strength,
)
from uniassist.domain.scoring.text_scoring import (
    EXTRACURRICULAR_RULE,
    GOALS_RULE,
    count_activities,
)


LONG_GOALS = ("I plan to build a career in robotics and study control systems. " * 4).strip()
LONG_EXPERIENCE = (
    "I led a robotics project where I was responsible for the vision pipeline, "
    "managed a team of four volunteers, developed the firmware and achieved first place "
    "at the regional competition after several months of weekend work in the lab."
)


@pytest.fixture
def analyzer():
    return ApplicationStrengthAnalyzer()


class TestKeywordTextScorer:
    """Tests for rule-driven text scoring."""
    
    def test_long_specific_planned_goals(self):
        assert len(LONG_GOALS) > 200
        result = KeywordTextScorer(GOALS_RULE).score(LONG_GOALS)
        assert result.score == 90
        assert result.strengths == ["Exceptionally well-defined academic goals with clear plans"]
    
    def test_long_goals_without_planning_words(self):
        text = "My major interest is research in marine biology and coastal ecosystems. " * 3
        result = KeywordTextScorer(GOALS_RULE).score(text)
        assert result.score == 75
    
    def test_medium_goals(self):
        text = "x" * 120
        result = KeywordTextScorer(GOALS_RULE).score(text)
        assert result.score == 60
        assert result.improvements == ["Consider adding more specific details about your academic plans"]
    
    def test_short_goals(self):
        assert KeywordTextScorer(GOALS_RULE).score("Become an engineer").score == 40
    
    def test_blank_goals(self):
        result = KeywordTextScorer(GOALS_RULE).score("   ")
        assert result.score == 0
        assert result.improvements == ["Add your academic and career goals"]
    
    def test_length_is_measured_after_trimming(self):
        assert KeywordTextScorer(GOALS_RULE).score(" " * 150 + "x" * 50).score == 40
    
    def test_activity_count(self):
        assert count_activities("Chess club, debate; robotics.") == 3
        assert count_activities("a, , b") == 2
    
    @pytest.mark.parametrize("text,expected", [
        ("President of chess club, organize tournaments; volunteer tutor", 90),
        ("Captain of soccer team, choir", 75),
        ("Chess club, debate", 60),
        ("Chess club", 40),
    ])
    def test_extracurricular_tiers(self, text, expected):
        assert KeywordTextScorer(EXTRACURRICULAR_RULE).score(text).score == expected
    
    def test_custom_rule(self):
        rule = TextRule(
            field="goals",
            category="academic",
            patterns={"stem": r"math|physics"},
            tiers=(TextTier(10, 100, require_all=("stem",)),),
        )
        scorer = KeywordTextScorer(rule)
        assert scorer.score("I love physics and chemistry").score == 100
        assert scorer.score("I love chemistry and biology").score == 0


class TestUniversityFit:
    """Tests for goals vs university fit."""
    
    def test_strength_matches(self, free_university):
        fit = calculate_university_fit("I love research and engineering excellence", free_university)
        # 50 + 2/3 * 30 + 10
        assert fit == 80
    
    def test_program_mention_by_name(self, free_university):
        goals = "research, engineering excellence and physics"
        assert calculate_university_fit(goals, free_university) == 100
    
    def test_program_mention_by_description(self, free_university):
        # 50 + 20 * 1/2 + 10
        assert calculate_university_fit("I want to do quantum computing", free_university) == 70
    
    def test_base_without_data(self):
        bare = University(name="Bare", country="Japan")
        assert calculate_university_fit("Anything at all", bare) == 50
        assert calculate_university_fit("", bare) == 50


class TestApplicationStrengthAnalyzer:
    """Tests for the aggregated application analysis."""
    
    def test_empty_answers(self, analyzer):
        result = analyzer.analyze(ApplicationAnswers())
        assert result.overall_score == 0
        assert result.category_scores == {"academic": 0, "experience": 0, "extracurricular": 0, "fit": 0}
        assert result.improvements == [
            "Add your academic and career goals",
            "Include your relevant experiences",
            "Add your extracurricular activities",
        ]
    
    def test_only_present_categories_count(self, analyzer):
        result = analyzer.analyze(ApplicationAnswers(goals=LONG_GOALS))
        assert result.category_scores["academic"] == 90
        assert result.overall_score == 90
    
    def test_achievements_bonus(self, analyzer):
        answers = ApplicationAnswers(
            experience="x" * 120,
            achievements=("Received a national scholarship for science. " * 4).strip(),
        )
        result = analyzer.analyze(answers)
        assert result.category_scores["experience"] == 70
        assert "Notable achievements and recognition" in result.strengths
    
    def test_achievements_bonus_is_capped(self, analyzer):
        answers = ApplicationAnswers(
            experience=LONG_EXPERIENCE,
            achievements=("Won an award and an honor for community service. " * 4).strip(),
        )
        assert len(LONG_EXPERIENCE) > 200
        result = analyzer.analyze(answers)
        assert result.category_scores["experience"] == 100
    
    def test_fit_only_with_goals(self, analyzer, free_university):
        result = analyzer.analyze(ApplicationAnswers(experience="x" * 120), free_university)
        assert result.category_scores["fit"] == 0
    
    def test_fit_included_in_weighting(self, analyzer, free_university):
        goals = "I plan to pursue research with engineering excellence at university."
        result = analyzer.analyze(ApplicationAnswers(goals=goals), free_university)
        
        assert result.category_scores["academic"] == 40
        assert result.category_scores["fit"] == 80
        # (40 * 0.3 + 80 * 0.2) / 0.5
        assert result.overall_score == 56
        assert "Strong alignment with university values and programs" in result.strengths
    
    def test_analysis_is_idempotent(self, analyzer, free_university):
        answers = ApplicationAnswers(
            goals=LONG_GOALS,
            experience="x" * 120,
            extracurricular="Chess club president. Robotics team member.",
        )
        assert analyzer.analyze(answers, free_university) == analyzer.analyze(answers, free_university)
    
    def test_narratives_are_unique(self, analyzer):
        answers = ApplicationAnswers(goals="x" * 120, experience="x" * 120)
        result = analyzer.analyze(answers)
        assert len(result.improvements) == len(set(result.improvements))
    
    def test_module_function_and_record(self):
        result = score_application_strength(ApplicationAnswers(goals=LONG_GOALS))
        record = analysis_record(result)
        
        assert record["score"] == 90
        assert record["categoryScores"]["academic"] == 90
        assert record["weaknesses"] == result.improvements
        assert record["strengths"] == result.strengths
