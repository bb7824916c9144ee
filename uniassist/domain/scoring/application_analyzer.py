"""
Application Strength Analyzer

Scores free-text application answers and how well the stated goals line
up with a target university.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from uniassist.domain.models import ApplicationAnswers, MatchResult, University
from uniassist.domain.scoring.primitives import (
    round_score,
    unique_ordered,
    weighted_aggregate,
)
from uniassist.domain.scoring.text_scoring import TextScorer, default_text_scorers


logger = logging.getLogger(__name__)


CATEGORY_WEIGHTS: Dict[str, float] = {
    "academic": 0.3,
    "experience": 0.25,
    "extracurricular": 0.25,
    "fit": 0.2,
}


def calculate_university_fit(goals: str, university: Optional[University]) -> int:
    """
    Fit between stated goals and the university's strengths and programs.
    
    Base 50, plus:
    - 30 * share of university strengths mentioned in the goals
    - 10 when more than one strength is mentioned
    - 20 * share of programs mentioned (by name or description)
    - 10 when any program is mentioned
    Capped at 100.
    """
    fit = 50.0
    if not goals or university is None:
        return int(fit)
    
    goals_lower = goals.lower()
    
    if university.strengths:
        matched = [s for s in university.strengths if s.strip() and s.lower() in goals_lower]
        fit += len(matched) / len(university.strengths) * 30
        if len(matched) > 1:
            fit += 10
    
    programs = university.program_specific_info
    if programs:
        matched_programs = [
            name for name, info in programs.items()
            if (name.strip() and name.lower() in goals_lower)
            or (info.description and info.description.strip() and info.description.lower() in goals_lower)
        ]
        fit += len(matched_programs) / len(programs) * 20
        if matched_programs:
            fit += 10
    
    return min(100, round_score(fit))


class ApplicationStrengthAnalyzer:
    """
    Application strength analysis.
    
    Each answer field is scored by a TextScorer strategy. Categories that
    stayed at zero are left out of the weighting, so a blank field lowers
    the completeness notes but not the average of what was written.
    """
    
    def __init__(self, scorers: Optional[Sequence[TextScorer]] = None):
        self._scorers = list(scorers) if scorers is not None else default_text_scorers()
    
    def analyze(
        self,
        answers: ApplicationAnswers,
        university: Optional[University] = None,
    ) -> MatchResult:
        scores: Dict[str, int] = {category: 0 for category in CATEGORY_WEIGHTS}
        strengths: List[str] = []
        improvements: List[str] = []
        
        for scorer in self._scorers:
            text = getattr(answers, scorer.field, "") or ""
            outcome = scorer.score(text)
            if scorer.additive:
                if text.strip():
                    scores[scorer.category] = min(100, scores.get(scorer.category, 0) + outcome.score)
            else:
                scores[scorer.category] = outcome.score
            strengths.extend(outcome.strengths)
            improvements.extend(outcome.improvements)
        
        if university is not None and answers.goals.strip():
            fit = calculate_university_fit(answers.goals, university)
            scores["fit"] = fit
            if fit >= 90:
                strengths.append("Exceptional alignment with university values and programs")
            elif fit >= 75:
                strengths.append("Strong alignment with university values and programs")
            elif fit >= 60:
                strengths.append("Good alignment with university")
                improvements.append("Consider highlighting more specific connections to university programs")
            else:
                improvements.append("Try to better align your goals with university strengths and programs")
        
        present = {category: score for category, score in scores.items() if score > 0}
        overall = weighted_aggregate(present, CATEGORY_WEIGHTS)
        
        logger.debug(f"[ANALYSIS] Application scored {overall} ({present})")
        
        return MatchResult(
            overall_score=overall,
            category_scores=scores,
            strengths=unique_ordered(strengths),
            improvements=unique_ordered(improvements),
        )


def score_application_strength(
    answers: ApplicationAnswers,
    university: Optional[University] = None,
) -> MatchResult:
    return ApplicationStrengthAnalyzer().analyze(answers, university)


def analysis_record(result: MatchResult) -> Dict[str, Any]:
    """JSON-ready analysis object stored alongside the saved answers."""
    return {
        "score": result.overall_score,
        "categoryScores": dict(result.category_scores),
        "strengths": list(result.strengths),
        "weaknesses": list(result.improvements),
    }
