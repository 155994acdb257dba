"""Book catalog module.

Provides functionality for:
- Adding books to the catalog
- Availability lookups by identifier
- Availability changes driven by the lending ledger
"""

from .manager import Catalog, DuplicateBookError
from .models import Book
from .schemas import BookCreate

__all__ = [
    "Catalog",
    "DuplicateBookError",
    "Book",
    "BookCreate",
]
