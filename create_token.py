#!/usr/bin/env python3
"""
Print a bearer token for a user of the Hotel Reviews API.

The token is signed with ``SECRET_KEY`` from the environment, so run
this with the same settings as the server.  The user must already
exist (e.g. created through ``POST /api/v1/auth/token``) for the token
to be accepted.

Usage:
    python create_token.py --user-id 42 --days 365
"""

import argparse

from hotel_reviews_api.app.core.security import create_access_token


def main():
    ap = argparse.ArgumentParser(description="Create an access token for a user id.")
    ap.add_argument("--user-id", required=True, help="Id of the user the token authenticates")
    ap.add_argument("--days", type=int, default=1, help="Token lifetime in days (default: 1)")
    args = ap.parse_args()

    print(create_access_token({"sub": args.user_id}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
