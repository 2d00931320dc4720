"""User administration endpoints."""

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from contact_api.api.http.deps import (
    get_current_principal,
    get_db_session,
    get_user_service,
    require_admin,
)
from contact_api.core.models.auth import Principal
from contact_api.core.services.user import UserService
from contact_api.entities.user import UserCredentials, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/current", response_model=UserRead)
def current_user(
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
) -> UserRead:
    """Return the authenticated caller."""
    return UserRead.from_user(users.get_user(principal.user_id))


@router.get("/all", response_model=list[UserRead])
def list_users(
    users: UserService = Depends(get_user_service),
    _: Principal = Depends(require_admin),
) -> list[UserRead]:
    return [UserRead.from_user(user) for user in users.list_users()]


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    credentials: UserCredentials,
    users: UserService = Depends(get_user_service),
    session: Session = Depends(get_db_session),
    _: Principal = Depends(require_admin),
) -> UserRead:
    user = users.update_user(user_id, credentials)
    session.commit()
    return UserRead.from_user(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(
    user_id: int,
    users: UserService = Depends(get_user_service),
    session: Session = Depends(get_db_session),
    _: Principal = Depends(require_admin),
) -> None:
    users.delete_user(user_id)
    session.commit()
