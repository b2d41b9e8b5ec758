# ats_scorer/prompts.py - Prompt sent to the AI provider

ANALYSIS_TEMPLATE = """Analyze this resume against the job description and provide the following:

1. Overall ATS compatibility score (0-100)
2. Keyword match score (0-100)
3. Format score (0-100)
4. List of matched keywords (comma separated)
5. List of missing important keywords from job description (comma separated)
6. List of improvement suggestions (one per line, starting with -)

Format your response exactly like this, with just the values:

OVERALL_SCORE: [number]
KEYWORD_SCORE: [number]
FORMAT_SCORE: [number]
MATCHED_KEYWORDS: [comma separated list]
MISSING_KEYWORDS: [comma separated list]
IMPROVEMENTS:
- [improvement 1]
- [improvement 2]
- [etc]

Resume:
<resume>
{resume_text}
</resume>

Job Description:
<job_description>
{job_description}
</job_description>"""


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    return ANALYSIS_TEMPLATE.format(resume_text=resume_text, job_description=job_description)
