# ats_scorer/models.py - Result types shared by the AI and heuristic paths

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisResult:
    """
    Scores and keyword lists for one resume / job description pair.

    Both scoring paths build this same shape, so callers never need to know
    which one produced it.
    """
    overall_score: int
    keyword_match_score: int
    format_score: int
    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "keyword_match_score": self.keyword_match_score,
            "format_score": self.format_score,
            "matched_keywords": list(self.matched_keywords),
            "missing_keywords": list(self.missing_keywords),
            "improvements": list(self.improvements),
        }


class AnalysisSource(enum.Enum):
    AI = "ai"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class Analysis:
    result: AnalysisResult
    source: AnalysisSource

    @property
    def used_fallback(self) -> bool:
        return self.source is AnalysisSource.HEURISTIC
