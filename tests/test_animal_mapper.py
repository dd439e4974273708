"""Tests for building Animal objects from payloads and rows."""

from decimal import Decimal

import pytest

from models.animal import IMAGE_SLOTS
from repositories.animal_mapper import (
    animal_from_payload,
    animal_from_record,
    animals_from_record_set,
    to_bool,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        (None, False),
        ("1", True),
        ("0", False),
        ("true", True),
        (" Yes ", True),
        ("false", False),
        ("", False),
    ],
)
def test_to_bool(value, expected) -> None:
    assert to_bool(value) is expected


def test_from_record_fills_image_slots_in_order(row_factory) -> None:
    row = row_factory(image1="a.jpg", image3="c.jpg", image5="e.jpg")
    animal = animal_from_record(row)
    assert animal.images == ["a.jpg", None, "c.jpg", None, "e.jpg"]
    assert len(animal.images) == IMAGE_SLOTS


def test_from_record_maps_columns(row_factory) -> None:
    row = row_factory(
        keyword="shark",
        name="Great White",
        kingdom="Animalia",
        description="Big fish",
        price=Decimal("999.99"),
        size="large",
        blood_temp="cold",
        venomous=1,
    )
    animal = animal_from_record(row)
    assert animal.key == "shark"
    assert animal.name == "Great White"
    assert animal.description == "Big fish"
    assert animal.price == Decimal("999.99")
    assert animal.size == "large"
    assert animal.bloodtemp == "cold"
    assert animal.venomous is True
    assert animal.attributes is None


@pytest.mark.parametrize("stored", [0, "0", False, None])
def test_from_record_venomous_is_false_boolean(row_factory, stored) -> None:
    assert animal_from_record(row_factory(venomous=stored)).venomous is False


def test_from_payload_key_argument_wins() -> None:
    payload = {"key": "from-payload", "name": "Cobra", "kingdom": "Animalia"}
    animal = animal_from_payload("cobra", payload)
    assert animal.key == "cobra"


def test_from_payload_keeps_references_and_coerces_venomous() -> None:
    images = ["x.png"]
    attributes = {"habitat": "desert"}
    payload = {
        "name": "Scorpion",
        "kingdom": "Animalia",
        "description": "Small arachnid",
        "price": 12.5,
        "size": "small",
        "blood_temp": "cold",
        "venomous": "true",
        "images": images,
        "attributes": attributes,
    }
    animal = animal_from_payload("scorpion", payload)
    assert animal.images is images
    assert animal.attributes is attributes
    assert animal.venomous is True
    assert animal.bloodtemp == "cold"
    assert animal.price == 12.5


def test_from_payload_missing_fields_are_none() -> None:
    animal = animal_from_payload("blob", {"name": "Blob", "kingdom": "Protista"})
    assert animal.description is None
    assert animal.images is None
    assert animal.venomous is False


def test_record_set_empty() -> None:
    assert animals_from_record_set([]) == []


def test_record_set_preserves_order(row_factory) -> None:
    rows = [row_factory(keyword=k, name=k.title()) for k in ("lion", "shark", "eagle")]
    animals = animals_from_record_set(rows)
    assert [a.key for a in animals] == ["lion", "shark", "eagle"]
