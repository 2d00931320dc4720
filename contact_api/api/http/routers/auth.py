"""Signup and login endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Session

from contact_api.api.http.deps import (
    get_db_session,
    get_jwt_generation_service,
    get_user_service,
)
from contact_api.core.services.jwt import JwtGeneratorService
from contact_api.core.services.user import UserService
from contact_api.entities.role import RoleName
from contact_api.entities.user import UserCredentials, UserRead

router = APIRouter(prefix="/api/auth", tags=["auth"])


class JwtResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    expires_in: int


def _signup(
    credentials: UserCredentials, role: RoleName, users: UserService, session: Session
) -> UserRead:
    user = users.register(credentials, role)
    session.commit()
    return UserRead.from_user(user)


def _login(
    credentials: UserCredentials,
    role: RoleName,
    users: UserService,
    jwt_gen: JwtGeneratorService,
) -> JwtResponse:
    user = users.authenticate(credentials, role)
    token = jwt_gen.issue(user.username, [r.value for r in sorted(user.roles)])
    return JwtResponse(token=token, expires_in=jwt_gen.expiration_time)


@router.post("/signup/user", response_model=UserRead)
def signup_user(
    credentials: UserCredentials,
    users: UserService = Depends(get_user_service),
    session: Session = Depends(get_db_session),
) -> UserRead:
    """Register an account with the USER role."""
    return _signup(credentials, RoleName.USER, users, session)


@router.post("/signup/admin", response_model=UserRead)
def signup_admin(
    credentials: UserCredentials,
    users: UserService = Depends(get_user_service),
    session: Session = Depends(get_db_session),
) -> UserRead:
    """Register an account with the ADMIN role."""
    return _signup(credentials, RoleName.ADMIN, users, session)


@router.post("/login/user", response_model=JwtResponse)
def login_user(
    credentials: UserCredentials,
    users: UserService = Depends(get_user_service),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> JwtResponse:
    """Exchange USER credentials for a bearer token."""
    return _login(credentials, RoleName.USER, users, jwt_gen)


@router.post("/login/admin", response_model=JwtResponse)
def login_admin(
    credentials: UserCredentials,
    users: UserService = Depends(get_user_service),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> JwtResponse:
    """Exchange ADMIN credentials for a bearer token."""
    return _login(credentials, RoleName.ADMIN, users, jwt_gen)
