from __future__ import annotations

from pydantic import BaseModel


CONTEXT_PLACEHOLDER = "Not provided"


class RewriteRequest(BaseModel):
    text: str
    context: str = CONTEXT_PLACEHOLDER


class RewriteResponse(BaseModel):
    text: str
