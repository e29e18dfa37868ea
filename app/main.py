from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import S, logger
from app.health_routes import router as health_router
from app.rewrite_routes import router as rewrite_router


app = FastAPI(title="Listing Rewrite Gateway", version="0.1")


@app.on_event("startup")
async def _startup_check_config() -> None:
    """Non-fatal checks to catch common misconfigurations early."""
    for name in ("SUPABASE_JWT_SECRET", "ADMIN_EMAIL", "GEMINI_API_KEY"):
        if not getattr(S, name):
            logger.warning("startup: %s is not set; /rewrite will refuse requests", name)


@app.middleware("http")
async def log_requests(req: Request, call_next):
    start = time.time()
    resp = None
    try:
        resp = await call_next(req)
        return resp
    finally:
        dur_ms = (time.time() - start) * 1000.0
        status = resp.status_code if resp is not None else 500
        logger.info("%s %s -> %d (%.1fms)", req.method, req.url.path, status, dur_ms)


app.add_middleware(
    CORSMiddleware,
    allow_origins=S.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Routers
app.include_router(health_router, prefix=S.API_PREFIX)
app.include_router(rewrite_router, prefix=S.API_PREFIX)
