# ats_scorer/advisor.py - Turn heuristic scores into improvement suggestions

LOW_OVERALL = 70
LOW_KEYWORD = 60
LOW_FORMAT = 80

_OVERALL_TIPS = [
    "Your resume needs significant improvements to pass ATS systems.",
]
_KEYWORD_TIPS = [
    "Add more relevant keywords from the job description to your resume.",
    "Customize your resume for each specific job application.",
]
_FORMAT_TIPS = [
    "Use a cleaner, ATS-friendly resume format.",
    "Avoid complex tables, headers/footers, and graphics.",
    "Use standard section headings (Experience, Education, Skills).",
]
WELL_OPTIMIZED = "Your resume is well-optimized for ATS systems!"


def advise(overall_score: int, keyword_match_score: int, format_score: int) -> list[str]:
    """
    Return the suggestions triggered by each low score, in a fixed order.
    Always returns at least one message.
    """
    improvements = []
    if overall_score < LOW_OVERALL:
        improvements.extend(_OVERALL_TIPS)
    if keyword_match_score < LOW_KEYWORD:
        improvements.extend(_KEYWORD_TIPS)
    if format_score < LOW_FORMAT:
        improvements.extend(_FORMAT_TIPS)
    if not improvements:
        improvements.append(WELL_OPTIMIZED)
    return improvements
