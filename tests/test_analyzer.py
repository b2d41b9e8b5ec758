"""
Tests for ResumeAnalyzer: AI path, fallback path and input checks.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from ats_scorer.analyzer import ResumeAnalyzer, analyze_resume
from ats_scorer.config import AnalyzerConfig
from ats_scorer.exceptions import ExternalCallFailure, MissingInputError, ProviderRateLimitError
from ats_scorer.heuristic import heuristic_analysis
from ats_scorer.models import AnalysisSource

AI_REPLY = """OVERALL_SCORE: 88
KEYWORD_SCORE: 91
FORMAT_SCORE: 79
MATCHED_KEYWORDS: python, docker
MISSING_KEYWORDS: kubernetes
IMPROVEMENTS:
- Mention Kubernetes exposure
"""


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig(provider="gemini", api_key="test-key")


class TestResumeAnalyzer:

    def test_ai_path(self, config, sample_resume, sample_job):
        call_model = MagicMock(return_value=AI_REPLY)
        analysis = ResumeAnalyzer(config, call_model=call_model).analyze_tagged(sample_resume, sample_job)

        assert analysis.source is AnalysisSource.AI
        assert not analysis.used_fallback
        assert analysis.result.overall_score == 88
        assert analysis.result.missing_keywords == ("kubernetes",)

        sent_config, prompt = call_model.call_args.args
        assert sent_config is config
        assert sample_resume in prompt
        assert sample_job in prompt
        assert "OVERALL_SCORE: [number]" in prompt

    def test_failing_call_falls_back_to_heuristic(self, config, fixed_rng, sample_resume, sample_job):
        call_model = MagicMock(side_effect=ExternalCallFailure("boom"))
        analyzer = ResumeAnalyzer(config, call_model=call_model, rng=fixed_rng(0.5))

        result = analyzer.analyze(sample_resume, sample_job)

        assert result == heuristic_analysis(sample_resume, sample_job, fixed_rng(0.5))

    def test_rate_limit_falls_back(self, config, sample_resume, sample_job):
        call_model = MagicMock(side_effect=ProviderRateLimitError("429"))
        analysis = ResumeAnalyzer(config, call_model=call_model).analyze_tagged(sample_resume, sample_job)
        assert analysis.source is AnalysisSource.HEURISTIC

    def test_unexpected_error_falls_back(self, config, sample_resume, sample_job):
        call_model = MagicMock(side_effect=KeyError("candidates"))
        analysis = ResumeAnalyzer(config, call_model=call_model).analyze_tagged(sample_resume, sample_job)
        assert analysis.used_fallback

    def test_unparseable_reply_falls_back(self, config, sample_resume, sample_job):
        call_model = MagicMock(return_value=None)
        analysis = ResumeAnalyzer(config, call_model=call_model).analyze_tagged(sample_resume, sample_job)
        assert analysis.source is AnalysisSource.HEURISTIC

    def test_missing_api_key_skips_call(self, sample_resume, sample_job):
        call_model = MagicMock()
        analysis = ResumeAnalyzer(AnalyzerConfig(api_key=""), call_model=call_model).analyze_tagged(
            sample_resume, sample_job,
        )
        call_model.assert_not_called()
        assert analysis.used_fallback

    def test_fallback_is_logged(self, config, sample_resume, sample_job, caplog):
        call_model = MagicMock(side_effect=ExternalCallFailure("timed out"))
        with caplog.at_level(logging.WARNING, logger="ats_scorer.analyzer"):
            ResumeAnalyzer(config, call_model=call_model).analyze(sample_resume, sample_job)
        assert "heuristic" in caplog.text
        assert "timed out" in caplog.text

    def test_flat_result_has_no_source_flag(self, config, sample_resume, sample_job):
        call_model = MagicMock(side_effect=ExternalCallFailure("boom"))
        result = ResumeAnalyzer(config, call_model=call_model).analyze(sample_resume, sample_job)
        assert set(result.to_dict()) == {
            "overall_score", "keyword_match_score", "format_score",
            "matched_keywords", "missing_keywords", "improvements",
        }

    @pytest.mark.parametrize("resume, job", [("", "python"), ("python", ""), ("   ", "python"), ("python", None)])
    def test_both_inputs_required(self, config, resume, job):
        call_model = MagicMock()
        with pytest.raises(MissingInputError):
            ResumeAnalyzer(config, call_model=call_model).analyze(resume, job)
        call_model.assert_not_called()


class TestAnalyzeResume:

    def test_uses_default_provider_call(self, config, sample_resume, sample_job):
        with patch("ats_scorer.analyzer.call_analysis", return_value=AI_REPLY) as call:
            result = analyze_resume(sample_resume, sample_job, config)
        call.assert_called_once()
        assert result.keyword_match_score == 91

    def test_reads_config_from_environment(self, monkeypatch, sample_resume, sample_job):
        monkeypatch.setenv("ATS_PROVIDER", "gemini")
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        with patch("ats_scorer.analyzer.call_analysis", return_value=AI_REPLY) as call:
            analyze_resume(sample_resume, sample_job)
        sent_config = call.call_args.args[0]
        assert sent_config.api_key == "env-key"
