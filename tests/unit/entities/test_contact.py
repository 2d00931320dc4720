import pytest
from pydantic import ValidationError
from sqlmodel import Session

from contact_api.entities.contact import (
    Contact,
    ContactPayload,
    ContactRepository,
    ContactTable,
    DuplicateContactTable,
)

VALID = {
    "firstName": "Jane",
    "lastName": "Doe",
    "email": "jane.doe+work@example.com",
    "phoneNumber": "+441234567890",
    "address": "221B Baker Street, London",
}


def _errors(**overrides) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        ContactPayload.model_validate({**VALID, **overrides})
    return [error["msg"] for error in exc_info.value.errors()]


class TestContactPayload:
    """Field rules applied to request bodies."""

    def test_valid_payload(self):
        payload = ContactPayload.model_validate(VALID)

        assert payload.first_name == "Jane"
        assert payload.phone_number == "+441234567890"

    def test_accepts_snake_case_names(self):
        payload = ContactPayload(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            phone_number="+441234567890",
        )

        assert payload.address is None

    @pytest.mark.parametrize("name", ["Jane2", "Mary Ann", "O'Neil", "Zoë"])
    def test_names_are_alphabetic(self, name: str):
        assert _errors(firstName=name) == ["First name must contain only alphabetic characters"]
        assert _errors(lastName=name) == ["Last name must contain only alphabetic characters"]

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "jane@example", "jane@exa-mple.com", "jane@example.c", "@example.com"],
    )
    def test_email_shape(self, email: str):
        assert _errors(email=email) == ["Email format is invalid"]

    @pytest.mark.parametrize(
        "phone",
        ["441234567890", "+4412345678", "+44123456789012", "+44 1234567890", "+4a1234567890"],
    )
    def test_phone_shape(self, phone: str):
        assert _errors(phoneNumber=phone) == [
            "Invalid phone number format. It should start with + and countrycode"
        ]

    def test_address_characters(self):
        assert _errors(address="Flat #4") == ["Invalid address format"]

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("firstName", "First name is required"),
            ("lastName", "Last name is required"),
            ("email", "Email is required"),
            ("phoneNumber", "Phone number is required"),
        ],
    )
    def test_required_fields(self, field: str, message: str):
        body = {k: v for k, v in VALID.items() if k != field}
        with pytest.raises(ValidationError) as exc_info:
            ContactPayload.model_validate(body)
        assert [e["msg"] for e in exc_info.value.errors()] == [message]

        assert _errors(**{field: "  "}) == [message]


class TestContactSerialization:
    def test_dumps_camel_case(self):
        contact = Contact(id=3, first_name="Jane", phone_number="+441234567890")

        dumped = contact.model_dump(by_alias=True)

        assert dumped["firstName"] == "Jane"
        assert dumped["phoneNumber"] == "+441234567890"
        assert dumped["id"] == 3


class TestContactRepository:
    """SQL-backed store behaviour."""

    def test_save_assigns_id_and_upserts(self, session: Session):
        repo = ContactRepository(session)

        created = repo.save(Contact(first_name="Jane", email="jane@example.com"))
        created.first_name = "Janet"
        updated = repo.save(created)

        assert created.id is not None
        assert updated.id == created.id
        assert repo.find_by_id(created.id).first_name == "Janet"
        assert len(repo.find_all()) == 1

    def test_lookup_by_keys(self, session: Session):
        repo = ContactRepository(session)
        repo.save(Contact(email="a@x.com", phone_number="+111111111111"))
        repo.save(Contact(email="b@x.com", phone_number="+111111111111"))

        assert [c.email for c in repo.find_by_email("a@x.com")] == ["a@x.com"]
        assert len(repo.find_by_phone_number("+111111111111")) == 2

    def test_delete_absent_id_is_ignored(self, session: Session):
        repo = ContactRepository(session)
        saved = repo.save(Contact(first_name="Jane"))

        repo.delete_by_id(saved.id)
        repo.delete_by_id(saved.id)

        assert repo.find_by_id(saved.id) is None

    def test_record_sets_are_independent(self, session: Session):
        contacts = ContactRepository(session, ContactTable)
        duplicates = ContactRepository(session, DuplicateContactTable)

        contacts.save(Contact(first_name="Plain"))
        duplicates.save(Contact(first_name="Dupe"))

        assert [c.first_name for c in contacts.find_all()] == ["Plain"]
        assert [c.first_name for c in duplicates.find_all()] == ["Dupe"]
