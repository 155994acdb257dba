"""Catalog records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """A book known to the catalog."""

    title: str
    author: str
    identifier: str  # ISBN or other unique catalog key
    available: bool = True

    def __str__(self) -> str:
        return f"{self.title} by {self.author} [{self.identifier}]"
