# ats_scorer/analyzer.py - Score a resume with the AI provider, falling back to local heuristics

from __future__ import annotations

import logging
import random
from typing import Callable

from ats_scorer.ai_providers import call_analysis
from ats_scorer.config import AnalyzerConfig
from ats_scorer.exceptions import MissingInputError
from ats_scorer.heuristic import heuristic_analysis
from ats_scorer.models import Analysis, AnalysisResult, AnalysisSource
from ats_scorer.prompts import build_analysis_prompt
from ats_scorer.response_parser import parse_response

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """
    Entry point used by the UI.

    Every analysis first goes to the configured AI provider. If the credential
    is missing, the call fails or times out, or the reply cannot be parsed, the
    local heuristic scorer answers instead. Callers always get a result; only
    the log records which path produced it.

    call_model(config, prompt) -> str can be swapped out in tests.
    """

    def __init__(
        self,
        config: AnalyzerConfig,
        call_model: Callable[[AnalyzerConfig, str], str] | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config
        self._call_model = call_model or call_analysis
        self._rng = rng

    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        return self.analyze_tagged(resume_text, job_description).result

    def analyze_tagged(self, resume_text: str, job_description: str) -> Analysis:
        if not (resume_text or "").strip() or not (job_description or "").strip():
            raise MissingInputError("Please provide both resume text and job description.")

        try:
            self.config.require_api_key()
            prompt = build_analysis_prompt(resume_text, job_description)
            raw = self._call_model(self.config, prompt)
            result = parse_response(raw)
        except Exception as e:
            logger.warning(
                "AI analysis via %s failed, using heuristic scoring: %s: %s",
                self.config.provider, type(e).__name__, e,
            )
            return Analysis(
                result=heuristic_analysis(resume_text, job_description, self._rng),
                source=AnalysisSource.HEURISTIC,
            )

        logger.info("AI analysis via %s scored %d overall", self.config.provider, result.overall_score)
        return Analysis(result=result, source=AnalysisSource.AI)


def analyze_resume(
    resume_text: str,
    job_description: str,
    config: AnalyzerConfig | None = None,
) -> AnalysisResult:
    """Convenience wrapper that reads the config from the environment when none is given."""
    return ResumeAnalyzer(config or AnalyzerConfig.from_env()).analyze(resume_text, job_description)
