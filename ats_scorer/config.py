# ats_scorer/config.py - Analyzer settings resolved from Streamlit secrets or the environment

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from ats_scorer.ai_providers import get_provider
from ats_scorer.exceptions import ConfigurationError

DEFAULT_PROVIDER = "gemini"
DEFAULT_TIMEOUT = 30.0

# Passed straight through to Gemini's safetySettings; never interpreted here.
DEFAULT_SAFETY_SETTINGS = (
    ("HARM_CATEGORY_HARASSMENT", "BLOCK_MEDIUM_AND_ABOVE"),
    ("HARM_CATEGORY_HATE_SPEECH", "BLOCK_MEDIUM_AND_ABOVE"),
    ("HARM_CATEGORY_SEXUALLY_EXPLICIT", "BLOCK_MEDIUM_AND_ABOVE"),
    ("HARM_CATEGORY_DANGEROUS_CONTENT", "BLOCK_MEDIUM_AND_ABOVE"),
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AnalyzerConfig:
    provider: str = DEFAULT_PROVIDER
    api_key: str = ""
    model: str = ""
    timeout: float = DEFAULT_TIMEOUT
    temperature: float = 0.1
    max_output_tokens: int = 1024
    safety_settings: tuple[tuple[str, str], ...] = DEFAULT_SAFETY_SETTINGS

    def require_api_key(self) -> str:
        if not self.api_key:
            key_name = get_provider(self.provider)["key_name"]
            raise ConfigurationError(f"No API key configured for {self.provider}; set {key_name}.")
        return self.api_key

    @classmethod
    def from_env(
        cls,
        secrets: Mapping | None = None,
        environ: Mapping | None = None,
    ) -> "AnalyzerConfig":
        """
        Build a config from Streamlit secrets, falling back to environment
        variables. Unknown providers raise ConfigurationError.
        """
        environ = os.environ if environ is None else environ

        def lookup(name: str, default: str = "") -> str:
            value = ""
            if secrets is not None:
                try:
                    value = secrets.get(name, "") or ""
                except Exception:
                    # st.secrets raises when no secrets.toml exists
                    value = ""
            return str(value or environ.get(name, "") or default)

        provider_id = lookup("ATS_PROVIDER", DEFAULT_PROVIDER).strip().lower()
        provider = get_provider(provider_id)

        timeout_raw = lookup("ATS_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ConfigurationError(f"ATS_TIMEOUT must be a number of seconds, got {timeout_raw!r}")

        return cls(
            provider=provider_id,
            api_key=lookup(provider["key_name"]).strip(),
            model=lookup("ATS_MODEL").strip(),
            timeout=timeout,
        )


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once; LOG_LEVEL overrides the default INFO."""
    level = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
