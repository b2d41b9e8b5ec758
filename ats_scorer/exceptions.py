# ats_scorer/exceptions.py - Error types raised across the scoring pipeline


class AnalyzerError(RuntimeError):
    """Base class for analysis failures."""


class ConfigurationError(AnalyzerError):
    """Raised when the AI provider is unknown or has no API key configured."""


class ExternalCallFailure(AnalyzerError):
    """Raised when the AI provider call fails (network, auth, bad payload)."""


class ProviderRateLimitError(ExternalCallFailure):
    """Raised when a provider returns HTTP 429 / quota exhausted."""
    pass


class ParseError(AnalyzerError):
    """Raised when a model reply cannot be read as text at all."""


class MissingInputError(ValueError):
    """Raised when the resume or the job description is blank."""


class UnsupportedFileType(ValueError):
    """Raised for uploads the resume parser cannot read."""


class ExtractionFailure(RuntimeError):
    """Raised when a supported file could not be turned into text."""
