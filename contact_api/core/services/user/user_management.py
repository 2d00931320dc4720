"""User registration, authentication and administration."""

from loguru import logger
from sqlmodel import Session

from contact_api.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
)
from contact_api.core.security import DEFAULT_ROUNDS, hash_password, verify_password
from contact_api.entities.role import RoleName, RoleRepository
from contact_api.entities.user import User, UserCredentials, UserRepository


class UserService:
    """Service for managing user accounts and their roles."""

    def __init__(self, session: Session, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self._users = UserRepository(session)
        self._roles = RoleRepository(session)
        self._bcrypt_rounds = bcrypt_rounds

    def register(self, credentials: UserCredentials, role: RoleName) -> User:
        """Create a user holding ``role``.

        Raises:
            ConflictError: If the username is already taken
            NotFoundError: If the role has not been seeded
        """
        if self._users.exists_by_username(credentials.username):
            raise ConflictError("Username is already taken!")

        stored_role = self._roles.get_by_name(role)
        if stored_role is None:
            raise NotFoundError(f"Role not found: {role.value}")

        user = self._users.create(
            username=credentials.username,
            password_hash=hash_password(credentials.password, self._bcrypt_rounds),
            role_ids=[stored_role.id],
        )
        logger.info("Registered user {} with role {}", user.username, role.value)
        return user

    def authenticate(self, credentials: UserCredentials, required_role: RoleName) -> User:
        """Check the password, then that the user holds ``required_role``.

        Raises:
            AuthenticationError: Unknown username or wrong password
            AuthorizationError: Valid credentials but the role is missing
        """
        user = self._users.get_by_username(credentials.username)
        if user is None or not verify_password(credentials.password, user.password_hash):
            logger.warning("Failed login for {}", credentials.username)
            raise AuthenticationError("Bad credentials")

        if not user.has_role(required_role):
            raise AuthorizationError(
                f"User does not have the required role: {required_role.value}"
            )

        logger.info("User {} logged in as {}", user.username, required_role.value)
        return user

    def load_by_username(self, username: str) -> User:
        user = self._users.get_by_username(username)
        if user is None:
            raise NotFoundError(f"User not found with username: {username}")
        return user

    def get_user(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        return user

    def list_users(self) -> list[User]:
        return self._users.list_all()

    def update_user(self, user_id: int, credentials: UserCredentials) -> User:
        """Replace a user's username and password; roles are untouched."""
        existing = self._users.get_by_username(credentials.username)
        if existing is not None and existing.id != user_id:
            raise ConflictError("Username is already taken!")

        user = self._users.update(
            user_id,
            username=credentials.username,
            password_hash=hash_password(credentials.password, self._bcrypt_rounds),
        )
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        logger.info("Updated user {}", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        if self._users.delete(user_id):
            logger.info("Deleted user {}", user_id)
