"""
Container health check for the CRM API.

Exits 0 when ``/health`` answers with a 2xx/3xx status, 1 otherwise.
"""

from __future__ import annotations

import argparse
import os
from urllib.error import URLError
from urllib.request import urlopen


def main() -> int:
    parser = argparse.ArgumentParser(description="Probe the ScholarCRM API health endpoint.")
    parser.add_argument("--host", default=os.getenv("HEALTHCHECK_HOST", "127.0.0.1"))
    parser.add_argument("--port", default=os.getenv("PORT", "8000"))
    parser.add_argument("--path", default=os.getenv("HEALTHCHECK_PATH", "/health"))
    parser.add_argument("--timeout", type=float, default=2.0)
    args = parser.parse_args()

    url = f"http://{args.host}:{args.port}{args.path}"
    try:
        with urlopen(url, timeout=args.timeout) as response:
            return 0 if 200 <= response.status < 400 else 1
    except (URLError, TimeoutError, ValueError):
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
