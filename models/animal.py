"""
models/animal.py
----------------
Domain model for catalog animals.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Union

# Fixed number of image slots per animal (image1..image5 in storage).
IMAGE_SLOTS = 5


def _empty_images() -> list[Optional[str]]:
    return [None] * IMAGE_SLOTS


@dataclass
class Animal:
    """
    Represents a single animal in the catalog.

    Attributes:
        name: Common name of the animal.
        kingdom: Kingdom the animal is listed under.
        key: Unique catalog identifier (the `keyword` column).
        description: Optional free-text description.
        price: Listed price (Decimal when read from PostgreSQL NUMERIC).
        size: Size category (e.g., 'small', 'large').
        bloodtemp: Blood temperature category ('warm' | 'cold').
        venomous: Whether the animal is venomous.
        attributes: Open key/value map, only present when built from a payload.
        images: Up to IMAGE_SLOTS image URIs, slot-ordered; empty slots are None.
    """
    name: str
    kingdom: str
    key: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[Decimal, float, int]] = None
    size: Optional[str] = None
    bloodtemp: Optional[str] = None
    venomous: bool = False
    attributes: Optional[dict[str, Any]] = None
    images: Optional[list[Optional[str]]] = field(default_factory=_empty_images)

    def image(self, index: int) -> Optional[str]:
        """Return the image in slot `index`, or None if the slot is empty or missing."""
        if not 0 <= index < IMAGE_SLOTS or not self.images or index >= len(self.images):
            return None
        return self.images[index]

    def image_slots(self) -> list[Optional[str]]:
        """All IMAGE_SLOTS slots in order, padded with None."""
        return [self.image(i) for i in range(IMAGE_SLOTS)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the payload shape accepted on insert."""
        return {
            "key": self.key,
            "name": self.name,
            "kingdom": self.kingdom,
            "description": self.description,
            "price": self.price,
            "size": self.size,
            "blood_temp": self.bloodtemp,
            "venomous": self.venomous,
            "attributes": self.attributes,
            "images": self.image_slots(),
        }

    def __str__(self) -> str:
        flag = "☠️" if self.venomous else "🐾"
        return f"{flag} {self.name} ({self.kingdom}) [{self.key}]"
