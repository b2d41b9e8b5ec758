# ats_scorer/keywords.py - Split free text into candidate ATS keywords

import re

# Common words that never count as keywords
STOP_WORDS = frozenset({
    "the", "and", "that", "have", "for", "not", "with", "you", "this", "but",
    "his", "from", "they", "will", "would", "there", "their", "what", "about",
    "which", "when", "make", "like", "time", "just", "know", "take", "person",
})

MIN_KEYWORD_LENGTH = 4

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")


def extract_keywords(text: str) -> list[str]:
    """
    Lower-case the text, drop punctuation and return the unique words longer
    than three characters that are not stop words.

    The list keeps first-occurrence order so matched/missing keyword lists
    come out in the order the job description mentions them.
    """
    cleaned = _NON_WORD.sub("", (text or "").lower())
    keywords = []
    seen = set()
    for word in cleaned.split():
        if len(word) < MIN_KEYWORD_LENGTH or word in STOP_WORDS or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
    return keywords
