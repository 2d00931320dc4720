"""CRUD operations over a contact store."""

from loguru import logger

from contact_api.core.errors import NotFoundError
from contact_api.entities.contact import Contact, ContactPayload, ContactStore


class ContactService:
    """Create, read, update and delete contacts in one record set."""

    def __init__(self, store: ContactStore):
        self._store = store

    def create(self, payload: ContactPayload) -> Contact:
        contact = self._store.save(payload.to_contact())
        logger.info("Contact created: id={}", contact.id)
        return contact

    def list_all(self) -> list[Contact]:
        return self._store.find_all()

    def get(self, contact_id: int) -> Contact:
        contact = self._store.find_by_id(contact_id)
        if contact is None:
            raise NotFoundError(f"Contact not found with id: {contact_id}")
        return contact

    def update(self, contact_id: int, payload: ContactPayload) -> Contact:
        """Replace all five mutable fields of an existing contact."""
        self.get(contact_id)
        contact = self._store.save(payload.to_contact(contact_id))
        logger.info("Contact updated: id={}", contact_id)
        return contact

    def delete(self, contact_id: int) -> None:
        self._store.delete_by_id(contact_id)
        logger.info("Contact deleted: id={}", contact_id)
