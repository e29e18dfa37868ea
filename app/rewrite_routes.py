from __future__ import annotations

import json
from typing import Any, Union

from fastapi import APIRouter, Request

from app.auth import require_admin
from app.config import S, logger
from app.errors import Failure, FailureCause, failure_response, unexpected_error
from app.rewrite import rewrite


router = APIRouter()


def _too_large(limit: int) -> Failure:
    logger.warning("rewrite: request body exceeds %d bytes", limit)
    return Failure(FailureCause.PAYLOAD_TOO_LARGE, "Payload too large")


async def _read_body(req: Request, limit: int) -> Union[Any, Failure]:
    """Decoded JSON body, None when it is not JSON, or a Failure when it is over `limit` bytes."""
    declared = req.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        return _too_large(limit)

    buf = bytearray()
    async for chunk in req.stream():
        buf.extend(chunk)
        if len(buf) > limit:
            return _too_large(limit)

    try:
        return json.loads(bytes(buf))
    except ValueError:
        return None


@router.post("/rewrite")
async def rewrite_route(req: Request):
    try:
        denied = require_admin(req, S)
        if denied is not None:
            return failure_response(denied)

        body = await _read_body(req, S.MAX_BODY_BYTES)
        if isinstance(body, Failure):
            return failure_response(body)

        out = await rewrite(body, S)
    except Exception:
        logger.exception("rewrite: server error")
        return failure_response(unexpected_error())

    if isinstance(out, Failure):
        return failure_response(out)
    return out
