from __future__ import annotations

from typing import Any, Union

from app.config import Settings, logger
from app.errors import Failure, FailureCause, configuration_missing
from app.models import CONTEXT_PLACEHOLDER, RewriteRequest, RewriteResponse
from app.upstreams import call_gemini


ROLE = "You are a real-estate assistant."

PROMPT_TEMPLATE = """Rewrite a real-estate description so that it is clear, concise and professional.
Keep the facts and do not invent any. Keep the text in {language}.
Context: {context}
Original description: {text}"""


def parse_rewrite_request(body: Any) -> Union[RewriteRequest, Failure]:
    if not isinstance(body, dict):
        return Failure(FailureCause.INVALID_INPUT, "Missing text")

    text = body.get("text")
    if not isinstance(text, str) or not text:
        return Failure(FailureCause.INVALID_INPUT, "Missing text")

    context = body.get("context")
    if not isinstance(context, str) or not context:
        context = CONTEXT_PLACEHOLDER
    return RewriteRequest(text=text, context=context)


def build_prompt(req: RewriteRequest, *, language: str) -> str:
    # Text and context are embedded verbatim.
    prompt = PROMPT_TEMPLATE.format(language=language, context=req.context, text=req.text)
    return f"{ROLE}\n\n{prompt}"


async def rewrite(body: Any, settings: Settings) -> Union[RewriteResponse, Failure]:
    """Turn an admitted /rewrite body into rewritten text.

    The API key is checked before the body so deployment errors surface first.
    No upstream call is made unless the body is valid.
    """
    if not settings.GEMINI_API_KEY:
        logger.error("rewrite: missing GEMINI_API_KEY")
        return configuration_missing()

    parsed = parse_rewrite_request(body)
    if isinstance(parsed, Failure):
        return parsed

    prompt = build_prompt(parsed, language=settings.REWRITE_LANGUAGE)
    out = await call_gemini(prompt, settings)
    if isinstance(out, Failure):
        return out

    logger.info("rewrite: ok (%d chars)", len(out))
    return RewriteResponse(text=out)
