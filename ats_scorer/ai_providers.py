# ats_scorer/ai_providers.py - Provider registry and the single outbound analysis call

from ats_scorer import gemini_client
from ats_scorer.exceptions import ConfigurationError, ExternalCallFailure, ProviderRateLimitError

# ── Provider registry ──────────────────────────────────────────────────────────
# Entries with type="oai" use the OpenAI-compatible chat completions API.
PROVIDERS = [
    {
        "id": "gemini",
        "label": "Gemini 2.0 Flash",
        "key_name": "GEMINI_API_KEY",
        "type": "gemini",
        "model": gemini_client.DEFAULT_MODEL,
        "signup_url": "https://aistudio.google.com/app/apikey",
    },
    {
        "id": "anthropic",
        "label": "Claude Sonnet",
        "key_name": "ANTHROPIC_API_KEY",
        "type": "anthropic",
        "model": "claude-sonnet-4-5",
        "signup_url": "https://console.anthropic.com/",
    },
    {
        "id": "groq",
        "label": "Llama 3.3 70B · Groq",
        "key_name": "GROQ_API_KEY",
        "type": "oai",
        "base_url": "https://api.groq.com/openai/v1",
        "model": "llama-3.3-70b-versatile",
        "signup_url": "https://console.groq.com/keys",
    },
    {
        "id": "openrouter",
        "label": "Llama 3.3 70B · OpenRouter",
        "key_name": "OPENROUTER_API_KEY",
        "type": "oai",
        "base_url": "https://openrouter.ai/api/v1",
        "model": "meta-llama/llama-3.3-70b-instruct:free",
        "signup_url": "https://openrouter.ai/keys",
    },
]


def get_provider(provider_id: str) -> dict:
    for provider in PROVIDERS:
        if provider["id"] == provider_id:
            return provider
    known = ", ".join(p["id"] for p in PROVIDERS)
    raise ConfigurationError(f"Unknown AI provider {provider_id!r} (expected one of: {known})")


# ── Internal helpers ───────────────────────────────────────────────────────────

def _is_rate_limit(exc: Exception) -> bool:
    msg = str(exc).lower()
    return any(x in msg for x in ("429", "rate_limit", "rate limit", "resource_exhausted", "quota"))


def _wrap(exc: Exception, label: str) -> ExternalCallFailure:
    if _is_rate_limit(exc):
        return ProviderRateLimitError(f"{label} rate limit hit: {exc}")
    return ExternalCallFailure(f"{label} call failed: {exc}")


def _call_anthropic(api_key: str, model: str, prompt: str, temperature: float,
                    max_tokens: int, timeout: float) -> str:
    import anthropic
    client = anthropic.Anthropic(api_key=api_key, timeout=timeout)
    try:
        response = client.messages.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.RateLimitError as e:
        raise ProviderRateLimitError(str(e))
    except anthropic.APIError as e:
        raise _wrap(e, "Anthropic")
    return "".join(getattr(block, "text", "") for block in response.content).strip()


def _call_oai(base_url: str, api_key: str, model: str, prompt: str,
              temperature: float, max_tokens: int, timeout: float) -> str:
    """Make an OpenAI-compatible chat completion request."""
    from openai import OpenAI, OpenAIError, RateLimitError as OAIRateLimitError
    client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except OAIRateLimitError as e:
        raise ProviderRateLimitError(str(e))
    except OpenAIError as e:
        raise _wrap(e, model)
    return resp.choices[0].message.content or ""


# ── Public API ─────────────────────────────────────────────────────────────────

def call_analysis(config, prompt: str) -> str:
    """
    Send the analysis prompt to the configured provider and return its raw reply.

    config is an AnalyzerConfig. Raises ConfigurationError for a missing key or
    unknown provider, ProviderRateLimitError on 429 and ExternalCallFailure
    for anything else that goes wrong on the wire.
    """
    provider = get_provider(config.provider)
    api_key = config.require_api_key()
    model = config.model or provider["model"]
    t = provider["type"]

    if t == "gemini":
        return gemini_client.generate_text(
            prompt,
            api_key=api_key,
            model=model,
            safety_settings=config.safety_settings,
            temperature=config.temperature,
            max_output_tokens=config.max_output_tokens,
            timeout=config.timeout,
        )

    if t == "anthropic":
        return _call_anthropic(
            api_key=api_key,
            model=model,
            prompt=prompt,
            temperature=config.temperature,
            max_tokens=config.max_output_tokens,
            timeout=config.timeout,
        )

    if t == "oai":
        return _call_oai(
            base_url=provider["base_url"],
            api_key=api_key,
            model=model,
            prompt=prompt,
            temperature=config.temperature,
            max_tokens=config.max_output_tokens,
            timeout=config.timeout,
        )

    raise ConfigurationError(f"Unknown provider type: {t}")
