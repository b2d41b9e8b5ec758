# ats_scorer/gemini_client.py - Gemini text generation via direct REST API (no SDK)

import requests

from ats_scorer.exceptions import ExternalCallFailure, ProviderRateLimitError

DEFAULT_MODEL = "gemini-2.0-flash"
_API_URL = "https://generativelanguage.googleapis.com/v1/models/{model}:generateContent"


def generate_text(
    prompt: str,
    api_key: str,
    model: str = DEFAULT_MODEL,
    safety_settings=(),
    temperature: float = 0.1,
    max_output_tokens: int = 1024,
    timeout: float = 30,
) -> str:
    """
    Send a single user prompt to Gemini and return the first candidate's text.

    safety_settings is a sequence of (category, threshold) pairs forwarded
    as-is. Raises ProviderRateLimitError on HTTP 429 and ExternalCallFailure
    on any other failure, including a blocked prompt with no candidates.
    """
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "safetySettings": [
            {"category": category, "threshold": threshold}
            for category, threshold in safety_settings
        ],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }

    try:
        resp = requests.post(
            _API_URL.format(model=model or DEFAULT_MODEL),
            headers={"x-goog-api-key": api_key},
            json=payload,
            timeout=timeout,
        )
    except requests.exceptions.Timeout:
        raise ExternalCallFailure(f"Gemini did not respond within {timeout:g} s.")
    except requests.exceptions.RequestException as e:
        # The exception text can carry the request URL; report only its type
        raise ExternalCallFailure(f"Could not reach Gemini ({type(e).__name__}).")

    if not resp.ok:
        _raise_friendly(resp)

    return _candidate_text(resp.json())


def _candidate_text(body: dict) -> str:
    try:
        parts = body["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        reason = (body.get("promptFeedback") or {}).get("blockReason") if isinstance(body, dict) else None
        if reason:
            raise ExternalCallFailure(f"Gemini blocked the prompt ({reason}).")
        raise ExternalCallFailure("Gemini returned no candidates.")
    return "".join(part.get("text", "") for part in parts).strip()


def _raise_friendly(resp: requests.Response):
    try:
        detail = resp.json()
        msg = detail.get("error", {}).get("message", resp.text)
    except (ValueError, AttributeError):
        msg = resp.text
    if resp.status_code == 429:
        raise ProviderRateLimitError(f"Gemini rate limit hit; try again in a moment. ({msg})")
    if resp.status_code == 403:
        raise ExternalCallFailure(f"Gemini API key invalid or missing permissions. ({msg})")
    raise ExternalCallFailure(f"Gemini API error {resp.status_code}: {msg}")
