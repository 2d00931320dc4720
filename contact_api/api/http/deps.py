"""FastAPI dependency implementations, including the authentication gate."""

from collections.abc import Callable, Iterator

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session

from contact_api.api.http.app_data import ApplicationDependencies
from contact_api.core.errors import AuthenticationError, AuthorizationError, NotFoundError
from contact_api.core.models.auth import Principal
from contact_api.core.services.contact import ContactService, DuplicateContactService
from contact_api.core.services.jwt import JwtGeneratorService, JwtVerificationService
from contact_api.core.services.user import UserService
from contact_api.entities.contact import (
    ContactRepository,
    ContactTable,
    DuplicateContactTable,
)
from contact_api.entities.role import RoleName
from contact_api.runtime.config.config_data import ConfigData

BEARER_PREFIX = "Bearer "


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_app_config(request: Request) -> ConfigData:
    return get_app_dependencies(request).config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session for the duration of the request."""
    session = get_app_dependencies(request).database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    return get_app_dependencies(request).jwt_verify_service


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    return get_app_dependencies(request).jwt_generation_service


def get_user_service(
    db: Session = Depends(get_db_session),
    config: ConfigData = Depends(get_app_config),
) -> UserService:
    return UserService(db, bcrypt_rounds=config.security.bcrypt_rounds)


def get_contact_service(db: Session = Depends(get_db_session)) -> ContactService:
    return ContactService(ContactRepository(db, ContactTable))


def get_duplicate_contact_service(
    db: Session = Depends(get_db_session),
) -> DuplicateContactService:
    return DuplicateContactService(ContactRepository(db, DuplicateContactTable))


def authenticate_request(
    request: Request,
    users: UserService = Depends(get_user_service),
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> Principal | None:
    """Resolve the bearer token into a principal.

    Requests without a bearer token are anonymous (``None``). Token failures
    propagate as ``TokenError`` and short-circuit the request.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None

    token = auth_header[len(BEARER_PREFIX) :]
    username = jwt_verify.extract_subject(token)

    try:
        user = users.load_by_username(username)
    except NotFoundError as e:
        raise AuthenticationError(f"User not found with username: {username}") from e

    if not jwt_verify.is_valid(token, user.username):
        return None

    logger.debug("Authenticated request for {}", user.username)
    return Principal(user_id=user.id, username=user.username, roles=user.roles)


def get_current_principal(
    principal: Principal | None = Depends(authenticate_request),
) -> Principal:
    if principal is None:
        raise AuthenticationError(
            "Full authentication is required to access this resource",
            description="Authentication is required to access this resource",
        )
    return principal


def require_roles(*roles: RoleName) -> Callable[..., Principal]:
    """Dependency factory admitting principals that hold any of ``roles``."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_any_role(*roles):
            raise AuthorizationError(
                f"Access denied for {principal.username}: requires one of "
                + ", ".join(role.value for role in roles)
            )
        return principal

    return dependency


require_admin = require_roles(RoleName.ADMIN)
require_user_or_admin = require_roles(RoleName.USER, RoleName.ADMIN)
