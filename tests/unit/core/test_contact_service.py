import pytest

from contact_api.core.errors import NotFoundError
from contact_api.core.services import ContactService
from contact_api.entities.contact import ContactPayload, InMemoryContactRepository


def _payload(**overrides) -> ContactPayload:
    values = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "phone_number": "+911234567890",
        "address": "12 Main Street, Springfield",
    }
    values.update(overrides)
    return ContactPayload(**values)


class TestContactService:
    """CRUD behaviour over an in-memory store."""

    def test_create_assigns_identity(self, contact_service: ContactService):
        first = contact_service.create(_payload())
        second = contact_service.create(_payload(email="john@example.com"))

        assert first.id == 1
        assert second.id == 2
        assert contact_service.get(1).email == "jane@example.com"

    def test_list_all_in_id_order(self, contact_service: ContactService):
        contact_service.create(_payload(first_name="Amy"))
        contact_service.create(_payload(first_name="Ben"))

        assert [c.first_name for c in contact_service.list_all()] == ["Amy", "Ben"]

    def test_get_missing_raises(self, contact_service: ContactService):
        with pytest.raises(NotFoundError) as exc_info:
            contact_service.get(42)

        assert exc_info.value.status_code == 404

    def test_update_overwrites_every_field(self, contact_service: ContactService):
        created = contact_service.create(_payload())

        updated = contact_service.update(
            created.id,
            _payload(first_name="Janet", email="janet@example.com", address=None),
        )

        assert updated.id == created.id
        assert updated.first_name == "Janet"
        assert updated.email == "janet@example.com"
        assert updated.address is None
        assert contact_service.get(created.id) == updated

    def test_update_missing_raises(self, contact_service: ContactService):
        with pytest.raises(NotFoundError):
            contact_service.update(7, _payload())

    def test_delete_is_idempotent(
        self,
        contact_service: ContactService,
        memory_store: InMemoryContactRepository,
    ):
        created = contact_service.create(_payload())

        contact_service.delete(created.id)
        contact_service.delete(created.id)
        contact_service.delete(999)

        assert len(memory_store) == 0
