"""Issue a bearer token for local API calls.

Run with:
    python3 scripts/issue_dev_token.py user-123 --email artist@example.com

Uses JWT_SECRET_KEY / JWT_ALGORITHM from the environment or .env, so the
token is accepted by a locally running API with the same settings.
"""

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT, "backend"))

from storyboarder.auth import create_access_token  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("user_id")
    parser.add_argument("--email", default=None)
    parser.add_argument("--minutes", type=int, default=None, help="lifetime override")
    args = parser.parse_args()

    token = create_access_token(args.user_id, email=args.email, expires_minutes=args.minutes)
    print(f"Authorization: Bearer {token}")


if __name__ == "__main__":
    main()
