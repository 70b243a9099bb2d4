"""
Import one property from a JSON file for a tenant, as the /properties/import endpoint would.

  python scripts/import_property.py TENANT_ID path/to/property.json
Exit code 1 when the import fails (validation error or property not created).
"""
import os
import sys
import argparse

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from homestay.database import Base, SessionLocal, engine  # noqa: E402
from homestay import models  # noqa: F401,E402
from homestay.seed import seed_catalog  # noqa: E402
from homestay.services.property_import import import_property  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Import a property from a JSON document")
    parser.add_argument("tenant_id", help="Tenant that will own the property")
    parser.add_argument("path", help="JSON file, or - for stdin")
    parser.add_argument("--no-seed", action="store_true", help="Do not seed the amenity/tag catalog first")
    args = parser.parse_args()

    if args.path == "-":
        raw = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8-sig") as f:
            raw = f.read()

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if not args.no_seed:
            seed_catalog(db)
        result = import_property(db, args.tenant_id, raw)
    finally:
        db.close()

    if result.success:
        print(f"OK  property id={result.property_id}")
        print(result.message)
        return 0
    print(f"FAIL {result.error}")
    if result.message:
        print(result.message)
    return 1


if __name__ == "__main__":
    sys.exit(main())
