from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class FailureCause(str, Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_CREDENTIAL = "invalid_credential"
    FORBIDDEN = "forbidden"
    INVALID_INPUT = "invalid_input"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_EMPTY_RESULT = "upstream_empty_result"
    UNEXPECTED_ERROR = "unexpected_error"


_STATUS: Dict[FailureCause, int] = {
    FailureCause.CONFIGURATION_MISSING: 500,
    FailureCause.MISSING_CREDENTIAL: 401,
    FailureCause.INVALID_CREDENTIAL: 401,
    FailureCause.FORBIDDEN: 403,
    FailureCause.INVALID_INPUT: 400,
    FailureCause.PAYLOAD_TOO_LARGE: 413,
    FailureCause.UPSTREAM_ERROR: 500,
    FailureCause.UPSTREAM_EMPTY_RESULT: 500,
    FailureCause.UNEXPECTED_ERROR: 500,
}


@dataclass(frozen=True)
class Failure:
    """Terminal outcome of a /rewrite request that did not produce text.

    `error` is the human-readable string returned to the caller; `details`
    carries the raw upstream error body for upstream failures only.
    """

    cause: FailureCause
    error: str
    details: Optional[str] = None

    @property
    def status_code(self) -> int:
        return _STATUS[self.cause]


def configuration_missing() -> Failure:
    # The missing variable is logged by the caller, never returned.
    return Failure(FailureCause.CONFIGURATION_MISSING, "Server misconfigured")


def unexpected_error() -> Failure:
    return Failure(FailureCause.UNEXPECTED_ERROR, "Server error")


def failure_response(failure: Failure) -> JSONResponse:
    content: Dict[str, Any] = {"error": failure.error, "code": failure.cause.value}
    if failure.details is not None:
        content["details"] = failure.details
    return JSONResponse(status_code=failure.status_code, content=content)
