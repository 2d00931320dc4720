"""Contact entity module.

This module contains all Contact-related classes organized by responsibility:
- Contact / ContactPayload: domain entity and validated request body
- ContactTable / DuplicateContactTable: the two persisted record sets
- ContactStore: persistence port, with SQL and in-memory adapters
"""

from .entity import Contact, ContactPayload
from .repository import ContactRepository, ContactStore, InMemoryContactRepository
from .table import ContactTable, DuplicateContactTable

__all__ = [
    "Contact",
    "ContactPayload",
    "ContactRepository",
    "ContactStore",
    "ContactTable",
    "DuplicateContactTable",
    "InMemoryContactRepository",
]
