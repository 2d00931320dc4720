"""Duplicate contact merging.

A single pass over the records in id order builds an index from dedup keys
(each non-empty email and each non-empty phone number) to the canonical record
that first claimed it. A record that hits the index, by email first and then by
phone, is folded into that canonical record: every non-null field overwrites
the canonical value, so later non-null values win. The folded record is then
scheduled for deletion.

Matching is not transitive. If record A is indexed under email E and phone P,
and record B only shares P while record C only shares B's email, C is compared
against the index, which never learned B's email, so C survives as its own
canonical record.
"""

from dataclasses import dataclass

from loguru import logger

from contact_api.entities.contact import Contact, ContactStore
from contact_api.entities.contact.entity import CONTACT_FIELDS

from .contact_service import ContactService

MERGE_SUCCESS_MESSAGE = "Contacts merged and duplicates deleted successfully."


@dataclass(frozen=True)
class MergeResult:
    saved: int
    deleted: int


def _absorb(canonical: Contact, duplicate: Contact) -> None:
    for name in CONTACT_FIELDS:
        value = getattr(duplicate, name)
        if value is not None:
            setattr(canonical, name, value)


def merge_duplicates(store: ContactStore) -> MergeResult:
    """Collapse records sharing a non-empty email or phone number.

    Canonical records are re-saved even when unchanged; only records folded
    into another one are deleted. Running it twice leaves the store unchanged.
    """
    index: dict[str, Contact] = {}
    canonical: dict[int, Contact] = {}
    to_delete: list[int] = []

    for contact in store.find_all():
        email_key = contact.email or ""
        phone_key = contact.phone_number or ""

        match = index.get(email_key) if email_key else None
        if match is None and phone_key:
            match = index.get(phone_key)

        if match is not None:
            _absorb(match, contact)
            to_delete.append(contact.id)
            continue

        canonical[id(contact)] = contact
        if email_key:
            index[email_key] = contact
        if phone_key:
            index[phone_key] = contact

    for contact in canonical.values():
        store.save(contact)
    for contact_id in to_delete:
        store.delete_by_id(contact_id)

    result = MergeResult(saved=len(canonical), deleted=len(to_delete))
    logger.info("Merged duplicate contacts: saved={} deleted={}", result.saved, result.deleted)
    return result


class DuplicateContactService(ContactService):
    """CRUD over the duplicate-prone record set, plus merging."""

    def merge_duplicates(self) -> str:
        merge_duplicates(self._store)
        return MERGE_SUCCESS_MESSAGE
