"""Contact database table models."""

from contact_api.entities._base import EntityTable


class ContactColumns(EntityTable, table=False):
    """Columns shared by both contact record sets."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None


class ContactTable(ContactColumns, table=True):
    __tablename__ = "contacts"


class DuplicateContactTable(ContactColumns, table=True):
    """Duplicate-prone record set that the merge operation deduplicates."""

    __tablename__ = "duplicate_contacts"
