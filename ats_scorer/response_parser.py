# ats_scorer/response_parser.py - Read the model's line-formatted reply into an AnalysisResult

from __future__ import annotations

import re

from ats_scorer.exceptions import ParseError
from ats_scorer.models import AnalysisResult

DEFAULT_IMPROVEMENT = "Customize your resume for this specific job posting."

# ── Field rules ────────────────────────────────────────────────────────────────
# Each field is searched for once across the whole reply; the first match wins.
# A missing or unreadable field falls back to its default. Nothing raises.

_SCORE_FIELDS = [
    # (result attribute, label, default)
    ("overall_score", "OVERALL_SCORE", 70),
    ("keyword_match_score", "KEYWORD_SCORE", 65),
    ("format_score", "FORMAT_SCORE", 75),
]

_LIST_FIELDS = [
    ("matched_keywords", "MATCHED_KEYWORDS"),
    ("missing_keywords", "MISSING_KEYWORDS"),
]

_IMPROVEMENTS_LABEL = re.compile(r"IMPROVEMENTS:")


def _score_pattern(label: str) -> re.Pattern:
    return re.compile(rf"{label}:\s*([0-9]+)")


def _list_pattern(label: str) -> re.Pattern:
    # Stay on the label's own line so a blank field does not swallow the next one
    return re.compile(rf"{label}:[ \t]*([^\r\n]*)")


_SCORE_PATTERNS = {attr: (_score_pattern(label), default) for attr, label, default in _SCORE_FIELDS}
_LIST_PATTERNS = {attr: _list_pattern(label) for attr, label in _LIST_FIELDS}


# ── Internal helpers ───────────────────────────────────────────────────────────

def _strip_fences(text: str) -> str:
    text = text.strip()
    text = re.sub(r"^```[\w-]*\s*", "", text)
    text = re.sub(r"\s*```$", "", text)
    return text


def _parse_score(text: str, pattern: re.Pattern, default: int) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else default


def _parse_list(text: str, pattern: re.Pattern) -> list[str]:
    match = pattern.search(text)
    if not match:
        return []
    return [item.strip() for item in match.group(1).split(",") if item.strip()]


def _parse_improvements(text: str) -> list[str]:
    """
    Collect "- " bullets following IMPROVEMENTS:, stopping at the first
    blank line. Text on the label's own line is read as well.
    """
    match = _IMPROVEMENTS_LABEL.search(text)
    if not match:
        return [DEFAULT_IMPROVEMENT]

    lines = text[match.end():].splitlines()
    block = lines[:1]
    for line in lines[1:]:
        if not line.strip():
            break
        block.append(line)

    improvements = []
    for line in block:
        line = line.strip()
        if line.startswith("-"):
            improvements.append(line[1:].strip())
    return improvements or [DEFAULT_IMPROVEMENT]


# ── Public API ─────────────────────────────────────────────────────────────────

def parse_response(response_text: str) -> AnalysisResult:
    """
    Parse a reply in the OVERALL_SCORE / KEYWORD_SCORE / FORMAT_SCORE /
    MATCHED_KEYWORDS / MISSING_KEYWORDS / IMPROVEMENTS format.

    Scores are taken as given, without clamping to 0-100.
    Raises ParseError only if response_text is not a string.
    """
    if not isinstance(response_text, str):
        raise ParseError(f"Expected model reply text, got {type(response_text).__name__}")

    text = _strip_fences(response_text)

    fields = {}
    for attr, (pattern, default) in _SCORE_PATTERNS.items():
        fields[attr] = _parse_score(text, pattern, default)
    for attr, pattern in _LIST_PATTERNS.items():
        fields[attr] = tuple(_parse_list(text, pattern))
    fields["improvements"] = tuple(_parse_improvements(text))

    return AnalysisResult(**fields)
