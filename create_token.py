#!/usr/bin/env python3
"""
Print a long‑lived session token for an existing account.

Useful for scripts and integrations that call the API without going
through ``/login``.  The token carries the account's current identity
and is signed with ``SECRET_KEY``, so run this with the same
environment as the server.

Usage:
    python create_token.py --username owner --days 365
"""

import argparse
import sys
from typing import List, Optional

from club_manager_api.app.core.errors import StorageError
from club_manager_api.app.core.security import create_access_token
from club_manager_api.app.core.store import get_store
from club_manager_api.app.services.user_service import find_user_by_username


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Issue a long-lived Club Manager API token.")
    ap.add_argument("--username", required=True, help="Account to issue the token for")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days (default 365)")
    args = ap.parse_args(argv)

    if args.days < 1:
        print("[!] --days must be at least 1.", file=sys.stderr)
        return 1
    try:
        user = find_user_by_username(get_store().load(), args.username)
    except StorageError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    if not user:
        print(f"[!] No user found with username: {args.username}", file=sys.stderr)
        return 2

    print(create_access_token(user, expires_delta=args.days * 24 * 60 * 60))
    return 0


if __name__ == "__main__":
    sys.exit(main())
