"""
Score Primitives

Shared numeric helpers used by every scorer: clamping, rounding,
weighted aggregation with renormalization, and partial-credit tiers.
"""

import math
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union

from uniassist.domain.models import StudentProfile, University
from uniassist.infrastructure.exceptions import ValidationError

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

Predicate = Union[bool, Callable[[], bool]]


def clamp(value: float, lo: float = 0, hi: float = 100) -> float:
    """Bound value to [lo, hi]."""
    return max(lo, min(hi, value))


def round_score(value: float) -> int:
    """Round half up (2.5 -> 3), matching how scores are shown to students."""
    return int(math.floor(value + 0.5))


def weighted_aggregate(
    scores: Mapping[str, Optional[float]],
    weights: Mapping[str, float],
) -> int:
    """
    Weighted mean over the categories that are present.
    
    A category is present when it has a weight and its score is not None.
    Absent categories are dropped from both numerator and denominator, so
    missing data never counts as a zero against the total weight.
    
    Returns:
        round(sum(score * weight) / sum(weight)), or 0 when nothing is present
    """
    weighted_sum = 0.0
    total_weight = 0.0
    
    for category, weight in weights.items():
        score = scores.get(category)
        if score is None:
            continue
        weighted_sum += score * weight
        total_weight += weight
    
    if total_weight <= 0:
        return 0
    
    return round_score(weighted_sum / total_weight)


def partial_credit(tiers: Iterable[Tuple[Predicate, T]], floor: T) -> T:
    """
    Return the value of the first tier whose predicate holds.
    
    Tiers are ordered strictest first. Predicates may be plain booleans or
    zero-argument callables. When no tier holds the floor is returned, which
    is never a hard zero for sparse profiles.
    """
    for predicate, value in tiers:
        holds = predicate() if callable(predicate) else predicate
        if holds:
            return value
    return floor


def unique_ordered(items: Iterable[H]) -> List[H]:
    """Drop duplicates while keeping first-seen order."""
    seen: Dict[H, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return list(seen)


def contains_either(a: str, b: str) -> bool:
    """Case-insensitive bidirectional substring test. Blank text matches nothing."""
    a_lower = a.strip().lower()
    b_lower = b.strip().lower()
    if not a_lower or not b_lower:
        return False
    return a_lower in b_lower or b_lower in a_lower


def require_profile(profile: Optional[StudentProfile]) -> StudentProfile:
    """Scorers need a profile object; its fields may still be sparse."""
    if profile is None:
        raise ValidationError("A student profile is required for scoring", field="profile")
    return profile


def require_university(university: Optional[University]) -> University:
    """A university must carry its identity (name and country)."""
    if university is None:
        raise ValidationError("A university record is required for scoring", field="university")
    
    missing = [
        field for field in ("name", "country")
        if not getattr(university, field, "").strip()
    ]
    if missing:
        raise ValidationError(
            "University record is missing identity fields",
            field="university",
            missing_fields=missing,
        )
    return university
