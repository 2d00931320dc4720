"""Tests for duplicate contact merging."""

from contact_api.core.services import DuplicateContactService, merge_duplicates
from contact_api.core.services.contact import MERGE_SUCCESS_MESSAGE
from contact_api.entities.contact import (
    Contact,
    ContactPayload,
    ContactRepository,
    InMemoryContactRepository,
)

PHONE_A = "+11" + "0" * 10
PHONE_B = "+22" + "1" * 10
PHONE_C = "+33" + "2" * 10


def _store(*records: dict) -> InMemoryContactRepository:
    return InMemoryContactRepository([Contact(**record) for record in records])


class TestMergeDuplicates:
    def test_later_non_null_values_win(self):
        store = _store(
            {"id": 1, "email": "a@x.com", "phone_number": PHONE_A, "first_name": "A"},
            {"id": 2, "email": "a@x.com", "phone_number": None, "first_name": "B", "address": "Addr"},
        )

        result = merge_duplicates(store)

        remaining = store.find_all()
        assert len(remaining) == 1
        merged = remaining[0]
        assert merged.id == 1
        assert merged.email == "a@x.com"
        assert merged.first_name == "B"
        assert merged.address == "Addr"
        assert merged.phone_number == PHONE_A
        assert result.saved == 1
        assert result.deleted == 1

    def test_phone_match_merges(self):
        store = _store(
            {"email": "one@x.com", "phone_number": PHONE_A, "last_name": "Old"},
            {"email": None, "phone_number": PHONE_A, "last_name": "New"},
        )

        merge_duplicates(store)

        [merged] = store.find_all()
        assert merged.email == "one@x.com"
        assert merged.last_name == "New"

    def test_second_run_changes_nothing(self):
        store = _store(
            {"email": "a@x.com", "phone_number": PHONE_A, "first_name": "A"},
            {"email": "a@x.com", "phone_number": PHONE_B, "first_name": "B"},
            {"email": "c@x.com", "phone_number": PHONE_C, "first_name": "C"},
        )
        merge_duplicates(store)
        after_first = store.find_all()

        result = merge_duplicates(store)

        assert result.deleted == 0
        assert store.find_all() == after_first

    def test_records_without_keys_are_never_merged(self):
        store = _store(
            {"first_name": "A", "email": None, "phone_number": None},
            {"first_name": "B", "email": "", "phone_number": ""},
        )

        result = merge_duplicates(store)

        assert len(store) == 2
        assert result.deleted == 0

    def test_email_match_takes_priority_over_phone_match(self):
        store = _store(
            {"email": "e1@x.com", "phone_number": PHONE_A, "first_name": "First"},
            {"email": "e2@x.com", "phone_number": PHONE_B, "first_name": "Second"},
            {"email": "e1@x.com", "phone_number": PHONE_B, "first_name": "Third"},
        )

        merge_duplicates(store)

        first, second = store.find_all()
        assert first.id == 1
        assert first.first_name == "Third"
        assert first.phone_number == PHONE_B
        assert second.id == 2
        assert second.first_name == "Second"

    def test_matching_is_not_transitive(self):
        store = _store(
            {"email": "e1@x.com", "phone_number": PHONE_A},
            {"email": "e2@x.com", "phone_number": PHONE_A},
            {"email": "e2@x.com", "phone_number": PHONE_C},
        )

        merge_duplicates(store)

        remaining = store.find_all()
        assert [c.id for c in remaining] == [1, 3]
        # record 1 absorbed record 2's email without being re-indexed under it
        assert remaining[0].email == "e2@x.com"
        assert remaining[1].email == "e2@x.com"

    def test_empty_store(self):
        store = InMemoryContactRepository()

        result = merge_duplicates(store)

        assert result.saved == 0
        assert result.deleted == 0


class TestDuplicateContactService:
    def test_merge_against_database(
        self,
        duplicate_contact_service: DuplicateContactService,
        duplicate_store: ContactRepository,
    ):
        for first_name, email in (("Ann", "ann@x.com"), ("Anna", "ann@x.com"), ("Bob", "bob@x.com")):
            duplicate_contact_service.create(
                ContactPayload(
                    first_name=first_name,
                    last_name="Smith",
                    email=email,
                    phone_number=PHONE_A if first_name == "Ann" else PHONE_B,
                )
            )

        message = duplicate_contact_service.merge_duplicates()

        assert message == MERGE_SUCCESS_MESSAGE
        remaining = duplicate_store.find_all()
        assert [(c.first_name, c.email) for c in remaining] == [
            ("Anna", "ann@x.com"),
            ("Bob", "bob@x.com"),
        ]
        # Bob shares Anna's phone, but that number was never indexed
        assert remaining[0].phone_number == remaining[1].phone_number == PHONE_B
