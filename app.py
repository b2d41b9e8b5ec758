import html
import logging

import streamlit as st

from ats_scorer.analyzer import ResumeAnalyzer
from ats_scorer.ai_providers import get_provider
from ats_scorer.config import AnalyzerConfig, setup_logging
from ats_scorer.exceptions import ConfigurationError, ExtractionFailure, MissingInputError, UnsupportedFileType
from ats_scorer.report_builder import build_report_csv, build_report_docx
from ats_scorer.resume_parser import ACCEPTED_EXTENSIONS, parse_resume

setup_logging()
logger = logging.getLogger(__name__)

# ── Page config ───────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="ResumeAI Scorer",
    page_icon="📄",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Custom CSS ────────────────────────────────────────────────────────────────
st.markdown("""
<style>
    .main-title {
        font-size: 2.8rem;
        font-weight: 800;
        background: linear-gradient(135deg, #4F46E5, #7C3AED);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        margin-bottom: 0;
    }
    .subtitle {
        color: #94A3B8;
        font-size: 1rem;
        margin-top: 0;
        margin-bottom: 2rem;
    }
    .keyword-pill {
        display: inline-block;
        background: #1E293B;
        border: 1px solid #4F46E5;
        color: #A5B4FC;
        border-radius: 999px;
        padding: 2px 12px;
        font-size: 0.82rem;
        margin: 3px 3px 3px 0;
    }
    .keyword-pill.missing {
        border-color: #EF4444;
        color: #FCA5A5;
    }
    .section-label {
        font-size: 0.75rem;
        text-transform: uppercase;
        letter-spacing: 0.1em;
        color: #64748B;
        margin-bottom: 4px;
    }
    .score-card {
        background: #1E293B;
        border: 1px solid #334155;
        border-radius: 12px;
        padding: 1rem 1.25rem;
        margin-bottom: 1rem;
        text-align: center;
    }
    .score-number {
        font-size: 3rem;
        font-weight: 800;
        line-height: 1;
    }
    div[data-testid="stDownloadButton"] button {
        width: 100%;
    }
</style>
""", unsafe_allow_html=True)

# ── Session state initialisation ──────────────────────────────────────────────
if "resume_text" not in st.session_state:
    st.session_state.resume_text = ""
    st.session_state.upload_status = ""
    st.session_state.upload_name = ""
if "last_result" not in st.session_state:
    st.session_state.last_result = None


# ── Helpers ───────────────────────────────────────────────────────────────────

def _score_color(score: int) -> str:
    if score >= 80:
        return "#22C55E"   # green
    if score >= 60:
        return "#EAB308"   # yellow
    return "#EF4444"       # red


def _score_card(title: str, score: int):
    color = _score_color(score)
    st.markdown(
        f'<div class="score-card">'
        f'<div class="section-label">{title}</div>'
        f'<div class="score-number" style="color:{color}">{score}</div>'
        f'<div style="color:#94A3B8;font-size:0.85rem">/ 100</div>'
        f'</div>',
        unsafe_allow_html=True,
    )
    # Model-reported scores are not clamped, so keep the bar in range
    st.progress(max(0, min(100, score)) / 100)


def _pills(keywords, missing: bool = False) -> str:
    css = "keyword-pill missing" if missing else "keyword-pill"
    return "".join(f'<span class="{css}">{html.escape(k)}</span>' for k in keywords)


@st.cache_resource(show_spinner=False)
def _load_config() -> AnalyzerConfig:
    return AnalyzerConfig.from_env(secrets=st.secrets)


# ── Sidebar ───────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("## ⚙️ Settings")
    st.divider()

    config = None
    try:
        config = _load_config()
    except ConfigurationError as e:
        st.error(str(e))

    st.markdown("**🤖 AI Provider**")
    if config is not None:
        provider = get_provider(config.provider)
        if config.api_key:
            st.success(provider["label"])
        else:
            st.warning(
                f"No {provider['key_name']} found: scores will come from the local keyword heuristic. "
                f"[Get a key]({provider['signup_url']})"
            )

    st.divider()
    st.caption(
        "Scores estimate how well Applicant Tracking Systems can parse and keyword-match "
        "your resume for this posting."
    )

# ── Main header ───────────────────────────────────────────────────────────────
st.markdown('<p class="main-title">ResumeAI Scorer</p>', unsafe_allow_html=True)
st.markdown(
    '<p class="subtitle">AI-powered ATS compatibility check: scores, keyword gaps and '
    'concrete fixes for any job posting.</p>',
    unsafe_allow_html=True,
)

tab_upload, tab_results = st.tabs(["📤 Upload & Analyze", "📊 Results"])


# ══════════════════════════════════════════════════════════════════════════════
# TAB 1: UPLOAD & ANALYZE
# ══════════════════════════════════════════════════════════════════════════════
with tab_upload:

    col_left, col_right = st.columns(2, gap="large")

    # ── Left: resume ─────────────────────────────────────────────────────────
    with col_left:
        st.markdown('<p class="section-label">Your Resume</p>', unsafe_allow_html=True)

        uploaded_file = st.file_uploader(
            label="Upload resume",
            type=ACCEPTED_EXTENSIONS,
            label_visibility="collapsed",
            help="Accepts PDF, DOCX, or plain text (legacy .doc is not supported). Extracted text appears below.",
        )
        if uploaded_file and uploaded_file.name != st.session_state.upload_name:
            st.session_state.upload_name = uploaded_file.name
            with st.spinner(f"Processing {uploaded_file.name}..."):
                try:
                    st.session_state.resume_text = parse_resume(
                        uploaded_file.read(), uploaded_file.name, uploaded_file.type,
                    )
                    st.session_state.upload_status = f"Successfully processed {uploaded_file.name}"
                except (UnsupportedFileType, ExtractionFailure) as e:
                    logger.info("Could not extract %s: %s", uploaded_file.name, e)
                    st.session_state.upload_status = f"Failed to process {uploaded_file.name}. {e}"

        if st.session_state.upload_status:
            if st.session_state.upload_status.startswith("Failed"):
                st.error(st.session_state.upload_status)
            else:
                st.success(st.session_state.upload_status)

        resume_text = st.text_area(
            label="Resume text",
            key="resume_text",
            placeholder="Paste your resume text here...",
            height=320,
            label_visibility="collapsed",
        )

    # ── Right: job description ───────────────────────────────────────────────
    with col_right:
        st.markdown('<p class="section-label">Job Description</p>', unsafe_allow_html=True)
        job_description = st.text_area(
            label="Job description",
            placeholder="Paste the full job posting here: title, responsibilities, requirements...",
            height=390,
            label_visibility="collapsed",
        )
        words = len(job_description.split()) if job_description else 0
        st.caption(f"{words} words")

    st.markdown("")
    analyze_btn = st.button("🎯 Analyze Resume", type="primary", disabled=config is None)

    if analyze_btn:
        with st.spinner("Analyzing your resume..."):
            try:
                st.session_state.last_result = ResumeAnalyzer(config).analyze(resume_text, job_description)
                st.success("Analysis complete. Open the Results tab.")
            except MissingInputError as e:
                st.error(str(e))


# ══════════════════════════════════════════════════════════════════════════════
# TAB 2: RESULTS
# ══════════════════════════════════════════════════════════════════════════════
with tab_results:
    result = st.session_state.last_result
    if result is None:
        st.info("Run an analysis to see your scores here.")
    else:
        c1, c2, c3 = st.columns(3)
        with c1:
            _score_card("ATS Compatibility", result.overall_score)
        with c2:
            _score_card("Keyword Match", result.keyword_match_score)
        with c3:
            _score_card("Format", result.format_score)

        st.markdown("---")
        k_col1, k_col2 = st.columns(2, gap="large")
        with k_col1:
            st.markdown("**✅ Matched Keywords**")
            if result.matched_keywords:
                st.markdown(_pills(result.matched_keywords), unsafe_allow_html=True)
            else:
                st.caption("No matching keywords found.")
        with k_col2:
            st.markdown("**🔍 Missing Keywords**")
            if result.missing_keywords:
                st.markdown(_pills(result.missing_keywords, missing=True), unsafe_allow_html=True)
            else:
                st.caption("No missing keywords. Great job!")

        st.markdown("---")
        st.markdown("**💡 Suggested Improvements**")
        for tip in result.improvements:
            st.markdown(f"- {tip}")

        st.markdown("---")
        d_col1, d_col2, _ = st.columns([1, 1, 2])
        with d_col1:
            st.download_button(
                "⬇️ Report (DOCX)",
                data=build_report_docx(result),
                file_name="ats_report.docx",
                mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            )
        with d_col2:
            st.download_button(
                "⬇️ Report (CSV)",
                data=build_report_csv(result),
                file_name="ats_report.csv",
                mime="text/csv",
            )


# ── How it works ──────────────────────────────────────────────────────────────
st.markdown("---")
with st.expander("ℹ️ How It Works"):
    st.markdown("""
### How ResumeAI Scorer Works

This tool analyzes your resume against a specific job description to maximize your chances of
getting past Applicant Tracking Systems (ATS) and landing interviews.

#### The Analysis Process

1. **Keyword Matching**: The AI identifies important keywords and phrases from the job description
   and checks whether they appear in your resume.
2. **Format Analysis**: The AI evaluates your resume's structure, headings and overall format for
   ATS compatibility.
3. **Overall ATS Score**: A combined score based on keyword matching and formatting factors.
4. **AI-Generated Suggestions**: Personalized recommendations to improve your resume for this job.

#### Tips for Improving Your Score

- **Customize for each job**: Tailor your resume for each specific position.
- **Use relevant keywords**: Include industry-specific terms and skills mentioned in the job description.
- **Maintain clean formatting**: Use standard section headings and avoid complex design elements.
- **Quantify achievements**: Use numbers and metrics to demonstrate your impact.
- **Focus on relevance**: Prioritize recent and relevant experience.
""")
