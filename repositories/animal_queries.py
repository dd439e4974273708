"""
repositories/animal_queries.py
------------------------------
SQL statements for every access pattern on the `animal` table.
Every value is bound as a psycopg2 parameter; nothing is interpolated
into the statement text.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from config import ANIMAL_TABLE
from models.animal import IMAGE_SLOTS, Animal
from repositories.animal_mapper import IMAGE_COLUMNS
from repositories.exceptions import EmptyCriteriaError

Params = Union[tuple, Mapping[str, Any]]

INSERT_COLUMNS = (
    "keyword",
    "name",
    "kingdom",
    "description",
    "price",
    "size",
    "blood_temp",
    "venomous",
    *IMAGE_COLUMNS,
)

# Columns compared against each search term, in order (size is matched twice).
SEARCH_COLUMNS = ("description", "name", "size", "kingdom", "size", "blood_temp")


@dataclass(frozen=True)
class Statement:
    """SQL text plus the parameters bound to its placeholders."""
    sql: str
    params: Optional[Params] = None


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so a term only ever matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def select_all() -> Statement:
    return Statement(f"SELECT * FROM {ANIMAL_TABLE};")


def select_by_key(key: str) -> Statement:
    return Statement(f"SELECT * FROM {ANIMAL_TABLE} WHERE keyword = %s;", (key,))


def select_by_kingdom(kingdom: str) -> Statement:
    return Statement(f"SELECT * FROM {ANIMAL_TABLE} WHERE kingdom = %s;", (kingdom,))


def select_by_search_terms(terms: Sequence[str]) -> Statement:
    """
    Match animals where any term appears in any searchable column.

    Each term becomes one parenthesised group of LIKE comparisons, and the
    groups are OR-ed together. The term is LIKE-escaped once, wrapped in
    `%...%` and bound as a single named parameter shared by its group.

    Raises:
        EmptyCriteriaError: If `terms` is empty.
    """
    if not terms:
        raise EmptyCriteriaError("search term")

    groups = []
    params: dict[str, str] = {}
    for i, term in enumerate(terms):
        name = f"term_{i}"
        params[name] = f"%{escape_like(term)}%"
        group = " OR ".join(f"{column} LIKE %({name})s" for column in SEARCH_COLUMNS)
        groups.append(f"({group})")

    sql = f"SELECT * FROM {ANIMAL_TABLE} WHERE " + " OR ".join(groups) + ";"
    return Statement(sql, params)


def select_by_keys(keys: Sequence[str]) -> Statement:
    """
    Fetch every animal whose key is in `keys`.

    Raises:
        EmptyCriteriaError: If `keys` is empty.
    """
    if not keys:
        raise EmptyCriteriaError("key")

    predicate = " OR ".join("keyword = %s" for _ in keys)
    return Statement(f"SELECT * FROM {ANIMAL_TABLE} WHERE {predicate};", tuple(keys))


def insert_animal(animal: Animal) -> Statement:
    """Insert one row; the 13 parameters always follow INSERT_COLUMNS."""
    placeholders = ", ".join(["%s"] * len(INSERT_COLUMNS))
    sql = (
        f"INSERT INTO {ANIMAL_TABLE} ({', '.join(INSERT_COLUMNS)}) "
        f"VALUES ({placeholders});"
    )
    values = (
        animal.key,
        animal.name,
        animal.kingdom,
        animal.description,
        animal.price,
        animal.size,
        animal.bloodtemp,
        animal.venomous,
        *(animal.image(i) for i in range(IMAGE_SLOTS)),
    )
    return Statement(sql, values)
