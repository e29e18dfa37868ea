from __future__ import annotations

from typing import Any, Dict, Optional, Union

import httpx

from app.config import Settings, logger
from app.errors import Failure, FailureCause


def _client(timeout: float) -> httpx.AsyncClient:
    # Single attempt; generation can take minutes.
    return httpx.AsyncClient(timeout=timeout)


def gemini_payload(prompt: str, temperature: float) -> Dict[str, Any]:
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ],
        "generationConfig": {
            "temperature": temperature,
        },
    }


def extract_candidate_text(payload: Any) -> Optional[str]:
    """Return the trimmed text of the first candidate's first part, or None."""
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str):
        return None
    return text.strip() or None


async def call_gemini(prompt: str, settings: Settings) -> Union[str, Failure]:
    async with _client(settings.GEMINI_TIMEOUT_SEC) as client:
        try:
            r = await client.post(
                settings.gemini_url,
                params={"key": settings.GEMINI_API_KEY},
                headers={"Content-Type": "application/json"},
                json=gemini_payload(prompt, settings.REWRITE_TEMPERATURE),
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text
            logger.error("gemini: status=%s body=%s", e.response.status_code, body)
            return Failure(FailureCause.UPSTREAM_ERROR, "Gemini error", details=body)
        except httpx.RequestError as e:
            logger.error("gemini: request failed (%s: %s)", type(e).__name__, e)
            return Failure(FailureCause.UPSTREAM_ERROR, "Gemini error", details=f"{type(e).__name__}: {e}")

    try:
        data = r.json()
    except ValueError:
        data = None

    text = extract_candidate_text(data)
    if not text:
        logger.error("gemini: no completion returned")
        return Failure(FailureCause.UPSTREAM_EMPTY_RESULT, "No completion returned")
    return text
