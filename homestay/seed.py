"""Seed the standard amenity and property tag catalog."""
from sqlalchemy.orm import Session
from homestay.models.catalog import StandardAmenity, StandardPropertyTag

STANDARD_AMENITIES = [
    ("WiFi", "general", "wifi"),
    ("Free Parking", "general", "parking"),
    ("Air Conditioning", "room", "snowflake"),
    ("Heating", "room", "flame"),
    ("Hot Water", "bathroom", "droplet"),
    ("Private Bathroom", "bathroom", "bath"),
    ("Television", "room", "tv"),
    ("Mini Fridge", "room", "fridge"),
    ("Balcony", "room", "door-open"),
    ("Kitchen", "general", "utensils"),
    ("Breakfast Included", "food", "coffee"),
    ("Restaurant", "food", "utensils-crossed"),
    ("Swimming Pool", "outdoor", "waves"),
    ("Garden", "outdoor", "trees"),
    ("Bonfire", "outdoor", "flame-kindling"),
    ("Power Backup", "general", "battery"),
    ("Laundry", "general", "shirt"),
    ("Airport Pickup", "services", "plane"),
    ("Pet Friendly", "general", "paw-print"),
    ("Wheelchair Accessible", "general", "accessibility"),
]

STANDARD_TAGS = [
    "Family Friendly",
    "Couple Friendly",
    "Pet Friendly",
    "Workation",
    "Mountain View",
    "Lake View",
    "Beachfront",
    "Heritage",
    "Eco Stay",
    "Farm Stay",
    "Backwaters",
    "Forest",
    "Adventure",
]


def seed_catalog(db: Session) -> None:
    if db.query(StandardAmenity).count() == 0:
        for name, category, icon in STANDARD_AMENITIES:
            db.add(StandardAmenity(name=name, category=category, icon=icon))
    if db.query(StandardPropertyTag).count() == 0:
        for name in STANDARD_TAGS:
            db.add(StandardPropertyTag(name=name))
    db.commit()
