#!/usr/bin/env python3
"""
Reset a user's password in the Club Manager JSON database.

This script does not read or reveal any existing password.  It sets a
new salted PBKDF2 hash for the given username and leaves the rest of
the document untouched.

Usage:
    python reset_password.py --db ./database.json --username owner --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sys
from typing import List, Optional

from club_manager_api.app.core.errors import StorageError
from club_manager_api.app.core.security import hash_password
from club_manager_api.app.core.store import JsonStore
from club_manager_api.app.services.user_service import find_user_by_username


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset a Club Manager user password.")
    ap.add_argument("--db", required=True, help="Path to the JSON database (e.g., ./database.json)")
    ap.add_argument("--username", required=True, help="Username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    store = JsonStore(os.path.abspath(args.db))
    try:
        if not find_user_by_username(store.load(), args.username):
            print(f"[!] No user found with username: {args.username}", file=sys.stderr)
            return 2
        with store.transaction() as document:
            find_user_by_username(document, args.username)["password"] = hash_password(new_password)
    except StorageError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    print(f"[+] Password updated for user: {args.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
