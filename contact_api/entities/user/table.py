"""User database table models."""

from sqlmodel import Field, SQLModel

from contact_api.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    __tablename__ = "users"

    username: str = Field(unique=True, index=True)
    password_hash: str


class UserRoleLink(SQLModel, table=True):
    """Many-to-many link between users and roles."""

    __tablename__ = "user_roles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    role_id: int = Field(foreign_key="roles.id", primary_key=True)
