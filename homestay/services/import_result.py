"""Per-run import statistics: success counts per entity plus ordered warning messages.

Each importer step returns its own StepResult; the importer merges them into
ImportStats, which renders the summary shown to the user.
"""
from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MAX_WARNINGS = 5

# Entity keys, in import order
ROOMS = "rooms"
BED_CONFIGURATIONS = "bed_configurations"
ROOM_AMENITIES = "room_amenities"
HOSTS = "hosts"
REVIEW_SOURCES = "review_sources"
PROXIMITY_INFO = "proximity_info"
NEARBY_ATTRACTIONS = "nearby_attractions"
PROPERTY_FEATURES = "property_features"
BOOKING_SETTINGS = "booking_settings"
SPECIAL_OFFERS = "special_offers"
RULES_AND_POLICIES = "rules_and_policies"
SOCIAL_MEDIA_LINKS = "social_media_links"
PAYMENT_METHODS = "payment_methods"
BOOKING_CTAS = "booking_ctas"
PRICING = "pricing"
PROPERTY_AMENITIES = "property_amenities"
PROPERTY_TAGS = "property_tags"


def format_failure(label: str, identifier: str, message: str) -> str:
    """'Room "Deluxe": CHECK constraint failed: ck_rooms_capacity'."""
    return f'{label} "{identifier}": {message}'


@dataclass
class StepResult:
    """Outcome of one importer step. A step may touch several entity kinds (rooms also write beds and amenities)."""
    counts: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def succeeded(self, entity: str, n: int = 1) -> None:
        self.counts[entity] = self.counts.get(entity, 0) + n

    def failed(self, message: str) -> None:
        self.errors.append(message)

    def merge(self, other: "StepResult") -> "StepResult":
        for entity, n in other.counts.items():
            self.succeeded(entity, n)
        self.errors.extend(other.errors)
        return self


@dataclass
class ImportStats:
    counts: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def add(self, step: StepResult) -> None:
        for entity, n in step.counts.items():
            self.counts[entity] = self.counts.get(entity, 0) + n
        self.errors.extend(step.errors)

    def count(self, entity: str) -> int:
        return self.counts.get(entity, 0)

    def summary(self, property_name: str, max_warnings: int = DEFAULT_MAX_WARNINGS) -> str:
        message = (
            f'Successfully imported property "{property_name}" with {self.count(ROOMS)} rooms, '
            f"{self.count(HOSTS)} hosts, {self.count(PROPERTY_FEATURES)} features, and more."
        )
        if not self.errors:
            return message
        lines = ["", "", "Warnings:", *self.errors[:max_warnings]]
        message += "\n".join(lines)
        remaining = len(self.errors) - max_warnings
        if remaining > 0:
            message += f"\n... and {remaining} more"
        return message
