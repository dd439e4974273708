"""
repositories/exceptions.py
--------------------------
Errors raised by the catalog data-access layer itself.
Driver errors (psycopg2.Error) are never wrapped; they propagate as-is.
"""


class AnimalRepositoryError(Exception):
    """Base class for catalog repository errors."""


class EmptyCriteriaError(AnimalRepositoryError, ValueError):
    """A lookup was asked to filter on an empty list of terms or keys."""

    def __init__(self, criteria: str):
        super().__init__(f"At least one {criteria} is required.")
        self.criteria = criteria


class AnimalNotFoundError(AnimalRepositoryError, LookupError):
    """No animal is stored under the requested key."""

    def __init__(self, key: str):
        super().__init__(f"No animal with key {key!r}.")
        self.key = key
