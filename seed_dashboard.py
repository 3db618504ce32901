#!/usr/bin/env python3
"""
Create the dashboard database and load the placeholder data.

Applies pending migrations, seeds the demo user, customers and invoices
and optionally adds another user.  Running it twice is harmless.

Usage:
    python seed_dashboard.py --db ./invoice_dashboard.db
    python seed_dashboard.py --db ./invoice_dashboard.db --email me@example.com --name Me

If --password is omitted for an added user, you will be prompted to
enter it securely.
"""

import argparse
import getpass
import os
import sys

from invoice_dashboard.app.core.config import settings
from invoice_dashboard.app.core.db import init_db
from invoice_dashboard.app.core.seed import add_user, seed_database


def main():
    ap = argparse.ArgumentParser(description="Create and seed the invoice dashboard database (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file. Defaults to DATABASE_URL.")
    ap.add_argument("--email", help="Email of an extra user to create")
    ap.add_argument("--name", default="User", help="Display name of the extra user")
    ap.add_argument("--password", help="Password of the extra user. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    if args.db:
        settings.database_url = os.path.abspath(args.db)

    init_db()
    seed_database()
    print(f"[+] Seeded {settings.database_url}")

    if args.email:
        password = args.password or getpass.getpass("Enter password: ")
        if len(password) < 6:
            print("[!] Password must be at least 6 characters.", file=sys.stderr)
            sys.exit(1)
        add_user(args.name, args.email, password)
        print(f"[+] User ready: {args.email}")


if __name__ == "__main__":
    main()
