#!/usr/bin/env python3
"""Mint an admin bearer token for local smoke tests of /rewrite.

Uses the same SUPABASE_JWT_SECRET the gateway verifies with. Run it from the
repository root as a module so `app` is importable:

    SUPABASE_JWT_SECRET=... python -m tools.mint_token admin@example.com
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Dict, List, Optional

import jwt

from app.config import S


def mint_token(
    email: str,
    *,
    secret: str,
    ttl_sec: int = 3600,
    audience: Optional[str] = None,
    now: Optional[int] = None,
) -> str:
    iat = int(now if now is not None else time.time())
    payload: Dict[str, Any] = {"email": email, "iat": iat, "exp": iat + ttl_sec}
    if audience:
        payload["aud"] = audience
    return jwt.encode(payload, secret, algorithm=S.JWT_ALGORITHM)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Mint an admin token for the rewrite gateway.")
    parser.add_argument("email", nargs="?", default=S.ADMIN_EMAIL)
    parser.add_argument("--ttl", type=int, default=3600, help="lifetime in seconds")
    parser.add_argument("--audience", default=S.JWT_AUDIENCE or None)
    args = parser.parse_args(argv)

    if not S.SUPABASE_JWT_SECRET:
        print("error: SUPABASE_JWT_SECRET is not set", file=sys.stderr)
        return 1
    if not args.email:
        print("error: no email given and ADMIN_EMAIL is not set", file=sys.stderr)
        return 1

    print(mint_token(args.email, secret=S.SUPABASE_JWT_SECRET, ttl_sec=args.ttl, audience=args.audience))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
