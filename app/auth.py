from __future__ import annotations

from typing import Any, Dict, Optional

import jwt
from fastapi import Request

from app.config import Settings, logger
from app.errors import Failure, FailureCause, configuration_missing


def bearer_token(req: Request) -> Optional[str]:
    auth = req.headers.get("authorization", "")
    if not auth.lower().startswith("bearer "):
        return None
    token = auth.split(" ", 1)[1].strip()
    return token or None


def _decode(token: str, settings: Settings) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    kwargs: Dict[str, Any] = {}
    if settings.JWT_AUDIENCE:
        kwargs["audience"] = settings.JWT_AUDIENCE
    else:
        options["verify_aud"] = False
    return jwt.decode(
        token,
        settings.SUPABASE_JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options=options,
        **kwargs,
    )


def require_admin(req: Request, settings: Settings) -> Optional[Failure]:
    """Admit only the single configured admin identity.

    Returns None when the caller may proceed, otherwise the Failure to report.
    Configuration is checked before the request is looked at, so a
    misconfigured deployment refuses everything.
    """
    if not settings.SUPABASE_JWT_SECRET:
        logger.error("auth: missing SUPABASE_JWT_SECRET")
        return configuration_missing()
    if not settings.ADMIN_EMAIL:
        logger.error("auth: missing ADMIN_EMAIL")
        return configuration_missing()

    token = bearer_token(req)
    if not token:
        return Failure(FailureCause.MISSING_CREDENTIAL, "Missing authorization token")

    try:
        payload = _decode(token, settings)
    except jwt.InvalidTokenError as e:
        logger.warning("auth: JWT verification failed (%s: %s)", type(e).__name__, e)
        return Failure(FailureCause.INVALID_CREDENTIAL, "Invalid token")

    email = payload.get("email") if isinstance(payload, dict) else None
    if not isinstance(email, str) or email.lower() != settings.ADMIN_EMAIL:
        logger.info("auth: forbidden identity")
        return Failure(FailureCause.FORBIDDEN, "Forbidden")

    return None
