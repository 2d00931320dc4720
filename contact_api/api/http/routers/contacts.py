"""CRUD endpoints shared by both contact record sets."""

from collections.abc import Callable

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from contact_api.api.http.deps import (
    get_contact_service,
    get_db_session,
    require_admin,
    require_user_or_admin,
)
from contact_api.core.models.auth import Principal
from contact_api.core.services.contact import ContactService
from contact_api.entities.contact import Contact, ContactPayload


def build_contact_router(
    prefix: str,
    get_service: Callable[..., ContactService],
    tag: str,
) -> APIRouter:
    """Create the register/retrieve/update/delete routes for one record set."""
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.post("/register", response_model=Contact)
    def register_contact(
        payload: ContactPayload,
        service: ContactService = Depends(get_service),
        session: Session = Depends(get_db_session),
        _: Principal = Depends(require_user_or_admin),
    ) -> Contact:
        contact = service.create(payload)
        session.commit()
        return contact

    @router.get("/retrieve", response_model=list[Contact])
    def list_contacts(
        service: ContactService = Depends(get_service),
        _: Principal = Depends(require_admin),
    ) -> list[Contact]:
        return service.list_all()

    @router.get("/retrieve/{contact_id}", response_model=Contact)
    def get_contact(
        contact_id: int,
        service: ContactService = Depends(get_service),
        _: Principal = Depends(require_admin),
    ) -> Contact:
        return service.get(contact_id)

    @router.put("/update/{contact_id}", response_model=Contact)
    def update_contact(
        contact_id: int,
        payload: ContactPayload,
        service: ContactService = Depends(get_service),
        session: Session = Depends(get_db_session),
        _: Principal = Depends(require_admin),
    ) -> Contact:
        contact = service.update(contact_id, payload)
        session.commit()
        return contact

    @router.delete(
        "/delete/{contact_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    def delete_contact(
        contact_id: int,
        service: ContactService = Depends(get_service),
        session: Session = Depends(get_db_session),
        _: Principal = Depends(require_admin),
    ) -> None:
        service.delete(contact_id)
        session.commit()

    return router


router = build_contact_router("/api/contacts", get_contact_service, "contacts")
