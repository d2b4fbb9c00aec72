#!/usr/bin/env python3
"""Register the demo users against a running Ref API.

Usage:
    python create_test_users.py                          # uses API_BASE_URL
    python create_test_users.py http://localhost:8000    # explicit server

Users already registered (409) are skipped. Profile details (photo, bio, age)
are filled in with a follow-up PUT.
"""

import sys

from refmatch.client.api_client import ApiClient
from refmatch.services.seed_service import PROFILE_FIELDS, seed_service

# --- ANSI Colors ---
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
BOLD = "\033[1m"
RESET = "\033[0m"


def create_test_users(client: ApiClient) -> int:
    """Register every seed user. Returns how many were created."""
    created = 0
    for user in seed_service.users():
        result = client.register(
            user["email"],
            user["password"],
            name=user.get("name"),
            relationship_status=user.get("relationship_status"),
        )
        if not result:
            print(f"{RED}x {user['name']}: registration failed (already exists?){RESET}")
            continue

        user_id = result.get("user", {}).get("id")
        if not user_id:
            print(f"{YELLOW}! {user['name']} created but user id missing{RESET}")
            continue

        details = {k: user[k] for k in PROFILE_FIELDS if user.get(k) is not None}
        if client.update_profile(user_id, **details) is None:
            print(f"{YELLOW}! {user['name']} created but profile update failed{RESET}")
        else:
            print(f"{GREEN}✓ {user['name']} ({user['email']}) - {user['relationship_status']}{RESET}")
        created += 1
    return created


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else None
    client = ApiClient(base_url)
    print(f"{BOLD}Creating test users on {client.base_url}...{RESET}\n")
    created = create_test_users(client)
    print(f"\n{BOLD}Done: {created} user(s) created.{RESET}")


if __name__ == "__main__":
    main()
