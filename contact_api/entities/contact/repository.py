"""Contact stores: the narrow persistence port and its two adapters."""

from typing import Protocol

from sqlmodel import Session, select

from .entity import CONTACT_FIELDS, Contact
from .table import ContactColumns, ContactTable


class ContactStore(Protocol):
    """Persistence port used by the contact services and the merge engine."""

    def save(self, contact: Contact) -> Contact:
        """Insert when ``contact.id`` is None, otherwise upsert by id."""
        ...

    def find_by_id(self, contact_id: int) -> Contact | None: ...

    def find_all(self) -> list[Contact]:
        """All records in ascending id order."""
        ...

    def delete_by_id(self, contact_id: int) -> None:
        """Remove the record if present; absent ids are ignored."""
        ...

    def find_by_email(self, email: str) -> list[Contact]: ...

    def find_by_phone_number(self, phone_number: str) -> list[Contact]: ...


class ContactRepository:
    """SQLModel-backed contact store.

    Changes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: Session, table: type[ContactColumns] = ContactTable) -> None:
        self._session = session
        self._table = table

    @staticmethod
    def _to_entity(row: ContactColumns) -> Contact:
        return Contact(id=row.id, **{name: getattr(row, name) for name in CONTACT_FIELDS})

    def save(self, contact: Contact) -> Contact:
        values = contact.field_values()
        row = None if contact.id is None else self._session.get(self._table, contact.id)
        if row is None:
            row = self._table(id=contact.id, **values)
        else:
            for name, value in values.items():
                setattr(row, name, value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, contact_id: int) -> Contact | None:
        row = self._session.get(self._table, contact_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_all(self) -> list[Contact]:
        rows = self._session.exec(select(self._table).order_by(self._table.id)).all()
        return [self._to_entity(row) for row in rows]

    def delete_by_id(self, contact_id: int) -> None:
        row = self._session.get(self._table, contact_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def find_by_email(self, email: str) -> list[Contact]:
        statement = (
            select(self._table).where(self._table.email == email).order_by(self._table.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def find_by_phone_number(self, phone_number: str) -> list[Contact]:
        statement = (
            select(self._table)
            .where(self._table.phone_number == phone_number)
            .order_by(self._table.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]


class InMemoryContactRepository:
    """Dict-backed contact store for tests and scripting."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._records: dict[int, Contact] = {}
        self._next_id = 1
        for contact in contacts or []:
            self.save(contact)

    def save(self, contact: Contact) -> Contact:
        stored = contact.model_copy()
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)
        self._records[stored.id] = stored
        return stored.model_copy()

    def find_by_id(self, contact_id: int) -> Contact | None:
        record = self._records.get(contact_id)
        return None if record is None else record.model_copy()

    def find_all(self) -> list[Contact]:
        return [self._records[key].model_copy() for key in sorted(self._records)]

    def delete_by_id(self, contact_id: int) -> None:
        self._records.pop(contact_id, None)

    def find_by_email(self, email: str) -> list[Contact]:
        return [c for c in self.find_all() if c.email == email]

    def find_by_phone_number(self, phone_number: str) -> list[Contact]:
        return [c for c in self.find_all() if c.phone_number == phone_number]

    def __len__(self) -> int:
        return len(self._records)
