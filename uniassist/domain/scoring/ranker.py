"""
Recommendation Ranker

Filters, orders and truncates scored candidates for presentation.
"""

from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from uniassist.domain.models import MatchResult


C = TypeVar("C")


@dataclass(frozen=True)
class RankedCandidate(Generic[C]):
    """A candidate with its score and 1-based position."""
    candidate: C
    result: MatchResult
    rank: int
    
    def to_dict(self) -> dict:
        candidate = self.candidate
        if hasattr(candidate, "model_dump"):
            candidate = candidate.model_dump(by_alias=True, mode="json")
        return {
            "rank": self.rank,
            "candidate": candidate,
            "result": self.result.model_dump(mode="json", exclude_none=True),
        }


def tie_break(result: MatchResult) -> float:
    """Secondary sort key: admission chance, else raw score, else overall."""
    if result.admission_chance is not None:
        return float(result.admission_chance)
    if result.raw_score is not None:
        return result.raw_score
    return float(result.overall_score)


def rank_candidates(
    results: Iterable[Tuple[C, MatchResult]],
    min_score: int = 0,
    limit: Optional[int] = None,
) -> List[RankedCandidate[C]]:
    """
    Rank (candidate, result) pairs.
    
    Drops results below min_score, sorts by overall_score then tie_break
    (both descending), keeps input order for equal keys, and truncates.
    
    Args:
        results: Pairs in catalog order
        min_score: Inclusive cutoff on overall_score
        limit: Maximum entries returned; None keeps all
    """
    kept = [(c, r) for c, r in results if r.overall_score >= min_score]
    
    # sorted() is stable, so equal keys stay in catalog order
    ordered = sorted(kept, key=lambda pair: (-pair[1].overall_score, -tie_break(pair[1])))
    
    if limit is not None:
        ordered = ordered[:max(limit, 0)]
    
    return [
        RankedCandidate(candidate=c, result=r, rank=i)
        for i, (c, r) in enumerate(ordered, start=1)
    ]
