"""User domain entity and request/response shapes."""

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from contact_api.entities._base import Entity
from contact_api.entities.role import RoleName


class User(Entity):
    """An account holder. ``password_hash`` never leaves the service layer."""

    username: str = Field(description="Unique login name")
    password_hash: str = Field(description="bcrypt hash of the password", repr=False)
    roles: frozenset[RoleName] = Field(default_factory=frozenset)

    def has_role(self, role: RoleName) -> bool:
        return role in self.roles


class UserRead(BaseModel):
    """Public view of a user."""

    id: int
    username: str
    roles: list[RoleName] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls(id=user.id, username=user.username, roles=sorted(user.roles))


class UserCredentials(BaseModel):
    """Username/password pair used for signup, login and user updates."""

    username: str
    password: str = Field(repr=False)

    @field_validator("username", "password")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise PydanticCustomError("blank", "must not be blank")
        return value
