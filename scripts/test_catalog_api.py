#!/usr/bin/env python3
"""
Smoke test for a running catalog server: page, categories, and every catalog fragment.

Start the API first (in another terminal):
  uvicorn src.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/test_catalog_api.py
  python scripts/test_catalog_api.py --base-url http://127.0.0.1:8000

If you see "Connection refused", the API is not running; start uvicorn as above.
"""

from __future__ import annotations

import argparse
from typing import Any, List

import requests
from bs4 import BeautifulSoup


def get(url: str, timeout: int = 60) -> requests.Response:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the catalog API")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== Catalog API smoke test ===\n")
    print(f"Base URL: {base}\n")

    print("1) GET /")
    try:
        page = BeautifulSoup(get(f"{base}/").text, "html.parser")
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 8000")
        return 1
    print(f"   buttons: {len(page.select('nav button'))}\n")

    print("2) GET /api/v1/categories")
    try:
        categories: List[Any] = get(f"{base}/api/v1/categories").json()
    except requests.RequestException as e:
        print(f"   FAIL: {e}\n")
        return 1
    print(f"   {len(categories)} categories\n")

    print("3) GET /api/v1/catalog/{trigger_id}")
    failures = 0
    for c in categories:
        trigger_id = c["trigger_id"]
        try:
            fragment = BeautifulSoup(get(f"{base}/api/v1/catalog/{trigger_id}").text, "html.parser")
        except requests.RequestException as e:
            print(f"   {trigger_id:<22} FAIL: {e}")
            failures += 1
            continue
        error = fragment.select_one("p.error")
        if error is not None:
            print(f"   {trigger_id:<22} ERROR: {error.get_text()}")
            failures += 1
        else:
            print(f"   {trigger_id:<22} {len(fragment.select('div.' + c['card_class']))} cards")

    print(f"\nDone: {len(categories) - failures}/{len(categories)} categories OK")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
