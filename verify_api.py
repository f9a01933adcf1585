#!/usr/bin/env python3
"""
Verification script for the rooms backend connection.

This script checks:
1. ROOMLOBBY_API_URL is configured
2. GET /api/users answers
3. GET /api/rooms answers
"""

import sys

from roomlobby.api import LobbyApiClient, ResultKind
from roomlobby.utils.config import api_base_url


def check_base_url() -> tuple[bool, str]:
    """Check that the backend base URL is configured."""
    try:
        url = api_base_url()
    except ValueError as e:
        return False, f"[X] {e}"
    if not url.startswith(("http://", "https://")):
        return False, f"[X] ROOMLOBBY_API_URL should start with http:// or https:// (got {url})"
    return True, f"[OK] ROOMLOBBY_API_URL is set: {url}"


def check_endpoint(client: LobbyApiClient, name: str) -> tuple[bool, str]:
    """Call one list endpoint and describe the outcome."""
    result = getattr(client, f"fetch_{name}")()
    if result.ok:
        count = len(result.value) if isinstance(result.value, list) else "?"
        return True, f"[OK] /api/{name} answered ({count} entries)"
    if result.kind is ResultKind.NOT_FOUND:
        return False, f"[X] /api/{name} not found (wrong base URL?)"
    if result.kind is ResultKind.HTTP_ERROR:
        return False, f"[X] /api/{name} returned status {result.status_code}"
    return False, f"[X] Could not reach /api/{name}: {result.error}"


def main() -> int:
    """Run all verification checks."""
    print("Verifying rooms backend connection\n")
    print("=" * 60)

    print("\n1. Checking configuration...")
    ok, msg = check_base_url()
    print(f"   {msg}")
    if not ok:
        print("\n[X] Set ROOMLOBBY_API_URL in .env and run again.")
        return 1

    all_checks_passed = True
    with LobbyApiClient(timeout=10) as client:
        for step, name in enumerate(("users", "rooms"), start=2):
            print(f"\n{step}. Checking /api/{name}...")
            ok, msg = check_endpoint(client, name)
            print(f"   {msg}")
            if not ok:
                all_checks_passed = False

    print("\n" + "=" * 60)
    if all_checks_passed:
        print("\n[OK] All checks passed!")
        return 0
    print("\n[X] Some checks failed. Please fix the issues above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
