# ats_scorer/heuristic.py - Local keyword-overlap scoring used when the AI call fails

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ats_scorer.advisor import advise
from ats_scorer.keywords import extract_keywords
from ats_scorer.models import AnalysisResult

KEYWORD_WEIGHT = 0.7
FORMAT_WEIGHT = 0.3

# Placeholder format score range. Nothing inspects the resume layout yet.
FORMAT_SCORE_FLOOR = 70
FORMAT_SCORE_SPREAD = 30

_default_rng = random.Random()


@dataclass(frozen=True)
class HeuristicScore:
    overall_score: int
    keyword_match_score: int
    format_score: int
    matched_keywords: tuple[str, ...]
    missing_keywords: tuple[str, ...]


def round_half_up(value: float) -> int:
    # round() rounds halves to even; scores round 0.5 up
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def match_keywords(job_keywords: list[str], resume_keywords: list[str]) -> tuple[list[str], list[str]]:
    """
    Split job keywords into (matched, missing).

    A job keyword counts as matched when it appears inside any resume keyword,
    so "python" matches "python3". Job order is preserved in both lists.
    """
    matched, missing = [], []
    for keyword in job_keywords:
        if any(keyword in candidate for candidate in resume_keywords):
            matched.append(keyword)
        else:
            missing.append(keyword)
    return matched, missing


def keyword_match_score(matched_count: int, job_keyword_count: int) -> int:
    if job_keyword_count == 0:
        return 0
    return min(100, round_half_up(matched_count / job_keyword_count * 100))


def placeholder_format_score(rng: random.Random | None = None) -> int:
    """
    Stand-in for real structural analysis: a pseudo-random value in [70, 100].
    Pass a seeded random.Random to get reproducible scores.
    """
    rng = rng or _default_rng
    return min(100, round_half_up(FORMAT_SCORE_FLOOR + rng.random() * FORMAT_SCORE_SPREAD))


def score_heuristic(
    resume_text: str,
    job_description: str,
    rng: random.Random | None = None,
) -> HeuristicScore:
    job_keywords = extract_keywords(job_description)
    resume_keywords = extract_keywords(resume_text)

    matched, missing = match_keywords(job_keywords, resume_keywords)
    keyword_score = keyword_match_score(len(matched), len(job_keywords))
    format_score = placeholder_format_score(rng)
    overall = _clamp(round_half_up(keyword_score * KEYWORD_WEIGHT + format_score * FORMAT_WEIGHT))

    return HeuristicScore(
        overall_score=overall,
        keyword_match_score=keyword_score,
        format_score=format_score,
        matched_keywords=tuple(matched),
        missing_keywords=tuple(missing),
    )


def heuristic_analysis(
    resume_text: str,
    job_description: str,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Score locally and attach the matching improvement suggestions."""
    score = score_heuristic(resume_text, job_description, rng)
    return AnalysisResult(
        overall_score=score.overall_score,
        keyword_match_score=score.keyword_match_score,
        format_score=score.format_score,
        matched_keywords=score.matched_keywords,
        missing_keywords=score.missing_keywords,
        improvements=tuple(advise(score.overall_score, score.keyword_match_score, score.format_score)),
    )
