"""
Print a bearer token for a tenant, for calling the API locally.
Run: python scripts/create_tenant_token.py TENANT_ID [--minutes 120]
"""
import os
import sys
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from homestay.services.auth import create_tenant_token  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Create a tenant bearer token")
    parser.add_argument("tenant_id")
    parser.add_argument("--minutes", type=int, default=None, help="Lifetime; defaults to JWT_ACCESS_TOKEN_EXPIRE_MINUTES")
    args = parser.parse_args()
    print(create_tenant_token(args.tenant_id, expires_minutes=args.minutes))


if __name__ == "__main__":
    main()
