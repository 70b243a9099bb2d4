"""
Create tables and seed the standard amenity / tag catalog (skips whatever is already seeded).
Run: python scripts/seed_catalog.py
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from homestay.database import Base, SessionLocal, engine  # noqa: E402
from homestay import models  # noqa: F401,E402
from homestay.models.catalog import StandardAmenity, StandardPropertyTag  # noqa: E402
from homestay.seed import seed_catalog  # noqa: E402


def run():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_catalog(db)
        print(f"Catalog: {db.query(StandardAmenity).count()} amenities, {db.query(StandardPropertyTag).count()} tags")
    finally:
        db.close()


if __name__ == "__main__":
    run()
