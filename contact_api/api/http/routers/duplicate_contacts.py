"""Duplicate-prone contact endpoints and merging."""

from fastapi import Depends
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from contact_api.api.http.deps import (
    get_db_session,
    get_duplicate_contact_service,
    require_admin,
)
from contact_api.api.http.routers.contacts import build_contact_router
from contact_api.core.models.auth import Principal
from contact_api.core.services.contact import DuplicateContactService

router = build_contact_router(
    "/api/duplicateContacts", get_duplicate_contact_service, "duplicate-contacts"
)


@router.post("/mergeDuplicates", response_class=PlainTextResponse)
def merge_duplicates(
    service: DuplicateContactService = Depends(get_duplicate_contact_service),
    session: Session = Depends(get_db_session),
    _: Principal = Depends(require_admin),
) -> str:
    """Collapse records sharing an email or phone number in one transaction."""
    message = service.merge_duplicates()
    session.commit()
    return message
