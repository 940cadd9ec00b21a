"""Container HEALTHCHECK probe for a running PortGuard instance.

    python scripts/healthcheck.py            # GET /live
    python scripts/healthcheck.py --deep     # GET /health (503 counts as failure)

Credentials for an auth-protected instance come from PORTGUARD_USERNAME and
PORTGUARD_PASSWORD. Exits 0 on a 2xx response, 1 otherwise.
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

import httpx


def probe(url: str, *, timeout: float, auth: Optional[tuple[str, str]] = None) -> tuple[bool, str]:
    try:
        resp = httpx.get(url, timeout=timeout, auth=auth)
    except httpx.HTTPError as e:
        return False, f"{url}: {e}"
    return resp.is_success, f"{url}: HTTP {resp.status_code}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Probe a PortGuard instance.")
    ap.add_argument("--host", default=os.getenv("HEALTH_HOST", "127.0.0.1"))
    ap.add_argument("--port", type=int, default=int(os.getenv("PORT", "8888")))
    ap.add_argument("--timeout", type=float, default=float(os.getenv("HEALTH_TIMEOUT", "5")))
    ap.add_argument("--deep", action="store_true", help="query /health instead of /live")
    args = ap.parse_args(argv)

    username = os.getenv("PORTGUARD_USERNAME", "")
    password = os.getenv("PORTGUARD_PASSWORD", "")
    auth = (username, password) if username and password else None

    path = "/health" if args.deep else "/live"
    ok, detail = probe(f"http://{args.host}:{args.port}{path}", timeout=args.timeout, auth=auth)
    print(f"[{'OK' if ok else 'FAIL'}] {detail}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
