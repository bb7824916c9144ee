"""
Text Scoring

Keyword and threshold heuristics for free-text application answers.
The heuristics are plain data (TextRule / TextTier); KeywordTextScorer
evaluates them, so tuning a threshold or a pattern never touches code.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple, runtime_checkable


MEASURE_LENGTH = "length"
MEASURE_ACTIVITIES = "activities"

_ACTIVITY_SEPARATORS = re.compile(r"[.,;]")


@dataclass(frozen=True)
class TextTier:
    """
    One scoring tier, evaluated strictest first.
    
    A tier holds when measure > above, every pattern in require_all
    matches, and (if given) at least one pattern in require_any matches.
    """
    above: int
    score: int
    require_all: Tuple[str, ...] = ()
    require_any: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TextRule:
    """Scoring rule for one answer field."""
    field: str
    category: str
    tiers: Tuple[TextTier, ...]
    patterns: Dict[str, str] = field(default_factory=dict)
    measure: str = MEASURE_LENGTH
    empty_improvement: Optional[str] = None
    additive: bool = False  # add onto the category instead of setting it


@dataclass
class TextScore:
    score: int = 0
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)


@runtime_checkable
class TextScorer(Protocol):
    """Strategy that scores one free-text answer."""
    
    @property
    def field(self) -> str:
        ...
    
    @property
    def category(self) -> str:
        ...
    
    @property
    def additive(self) -> bool:
        ...
    
    def score(self, text: str) -> TextScore:
        ...


def count_activities(text: str) -> int:
    """Approximate activity count: non-blank segments split on . , ;"""
    return len([s for s in _ACTIVITY_SEPARATORS.split(text) if s.strip()])


class KeywordTextScorer:
    """Evaluates a TextRule against an answer."""
    
    def __init__(self, rule: TextRule):
        self._rule = rule
        self._patterns = {
            name: re.compile(pattern, re.IGNORECASE)
            for name, pattern in rule.patterns.items()
        }
    
    @property
    def rule(self) -> TextRule:
        return self._rule
    
    @property
    def field(self) -> str:
        return self._rule.field
    
    @property
    def category(self) -> str:
        return self._rule.category
    
    @property
    def additive(self) -> bool:
        return self._rule.additive
    
    def measure(self, text: str) -> int:
        if self._rule.measure == MEASURE_ACTIVITIES:
            return count_activities(text)
        return len(text)
    
    def score(self, text: str) -> TextScore:
        content = (text or "").strip()
        if not content:
            improvements = [self._rule.empty_improvement] if self._rule.empty_improvement else []
            return TextScore(improvements=improvements)
        
        size = self.measure(content)
        matched = {name for name, regex in self._patterns.items() if regex.search(content)}
        
        for tier in self._rule.tiers:
            if size <= tier.above:
                continue
            if not all(name in matched for name in tier.require_all):
                continue
            if tier.require_any and not any(name in matched for name in tier.require_any):
                continue
            return TextScore(
                score=tier.score,
                strengths=list(tier.strengths),
                improvements=list(tier.improvements),
            )
        
        return TextScore()


# ============================================================================
# Default rules
# ============================================================================

GOALS_RULE = TextRule(
    field="goals",
    category="academic",
    patterns={
        "specific": r"university|career|study|research|degree|major|academic",
        "planning": r"plan|intend|aim|aspire|future|objective",
    },
    tiers=(
        TextTier(200, 90, require_all=("specific", "planning"),
                 strengths=("Exceptionally well-defined academic goals with clear plans",)),
        TextTier(150, 75, require_all=("specific",),
                 strengths=("Well-defined academic goals with clear direction",)),
        TextTier(100, 60,
                 strengths=("Good academic goals foundation",),
                 improvements=("Consider adding more specific details about your academic plans",)),
        TextTier(0, 40,
                 improvements=("Elaborate more on your academic goals and be more specific",)),
    ),
    empty_improvement="Add your academic and career goals",
)

EXPERIENCE_RULE = TextRule(
    field="experience",
    category="experience",
    patterns={
        "relevant": r"project|internship|work|research|volunteer|leadership",
        "detailed": r"responsible|managed|led|developed|created|achieved",
    },
    tiers=(
        TextTier(200, 90, require_all=("relevant", "detailed"),
                 strengths=("Exceptional relevant experience with detailed accomplishments",)),
        TextTier(150, 75, require_all=("relevant",),
                 strengths=("Strong relevant experience with good details",)),
        TextTier(100, 60,
                 strengths=("Good experience foundation",),
                 improvements=("Add more specific details about your responsibilities and achievements",)),
        TextTier(0, 40,
                 improvements=("Provide more details about your experiences and their relevance",)),
    ),
    empty_improvement="Include your relevant experiences",
)

ACHIEVEMENTS_RULE = TextRule(
    field="achievements",
    category="experience",
    patterns={
        "recognition": r"award|honor|recognition|certificate|scholarship|prize",
    },
    tiers=(
        TextTier(150, 10, require_all=("recognition",),
                 strengths=("Notable achievements and recognition",)),
        TextTier(100, 5,
                 improvements=("Consider highlighting more significant achievements",)),
    ),
    additive=True,
)

EXTRACURRICULAR_RULE = TextRule(
    field="extracurricular",
    category="extracurricular",
    measure=MEASURE_ACTIVITIES,
    patterns={
        "leadership": r"leader|president|founder|captain|chair|coordinator|head|director",
        "involvement": r"organize|manage|coordinate|develop|create|lead",
    },
    tiers=(
        TextTier(2, 90, require_all=("leadership", "involvement"),
                 strengths=("Outstanding extracurricular involvement with leadership roles",)),
        TextTier(1, 75, require_any=("leadership", "involvement"),
                 strengths=("Strong extracurricular participation with good involvement",)),
        TextTier(1, 60,
                 strengths=("Good extracurricular participation",),
                 improvements=("Consider taking on leadership roles in your activities",)),
        TextTier(0, 40,
                 improvements=("Consider joining more extracurricular activities and taking leadership roles",)),
    ),
    empty_improvement="Add your extracurricular activities",
)

DEFAULT_RULES: Tuple[TextRule, ...] = (
    GOALS_RULE,
    EXPERIENCE_RULE,
    ACHIEVEMENTS_RULE,
    EXTRACURRICULAR_RULE,
)


def default_text_scorers() -> List[TextScorer]:
    return [KeywordTextScorer(rule) for rule in DEFAULT_RULES]
