"""
repositories/animal_mapper.py
-----------------------------
Builds Animal domain objects from request payloads and from `animal` rows.
"""

from typing import Any, Iterable, Mapping

from models.animal import IMAGE_SLOTS, Animal

_TRUE_STRINGS = {"1", "true", "t", "yes", "y", "on"}

# Row columns holding image slots 0..4, in order.
IMAGE_COLUMNS = tuple(f"image{i + 1}" for i in range(IMAGE_SLOTS))


def to_bool(value: Any) -> bool:
    """
    Normalize a stored or submitted flag to a real boolean.

    Strings are parsed ('0' and 'false' are False); everything else
    goes by truthiness, so 0/1 and None behave as expected.
    """
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def animal_from_payload(key: str, payload: Mapping[str, Any]) -> Animal:
    """
    Construct an Animal from a request payload.

    The `key` argument wins over any key carried inside the payload.
    `images` and `attributes` are kept by reference. Missing fields are
    left as None; the payload is expected to be validated upstream.

    Args:
        key: Unique catalog identifier for the new animal.
        payload: Request body with name, kingdom, description, price,
            attributes, images, size, venomous and blood_temp.

    Returns:
        An Animal populated from the payload.
    """
    return Animal(
        key=key,
        name=payload.get("name"),
        kingdom=payload.get("kingdom"),
        description=payload.get("description"),
        price=payload.get("price"),
        size=payload.get("size"),
        bloodtemp=payload.get("blood_temp"),
        venomous=to_bool(payload.get("venomous")),
        attributes=payload.get("attributes"),
        images=payload.get("images"),
    )


def animal_from_record(row: Mapping[str, Any]) -> Animal:
    """Convert an `animal` row (column name -> value) to an Animal."""
    return Animal(
        key=row["keyword"],
        name=row["name"],
        kingdom=row["kingdom"],
        description=row.get("description"),
        price=row.get("price"),
        size=row.get("size"),
        bloodtemp=row.get("blood_temp"),
        venomous=to_bool(row.get("venomous")),
        images=[row.get(column) for column in IMAGE_COLUMNS],
    )


def animals_from_record_set(rows: Iterable[Mapping[str, Any]]) -> list[Animal]:
    """Map every row in order; an empty result set gives an empty list."""
    return [animal_from_record(r) for r in rows]
