"""Role database table model."""

from sqlmodel import Field

from contact_api.entities._base import EntityTable


class RoleTable(EntityTable, table=True):
    __tablename__ = "roles"

    name: str = Field(unique=True, index=True)
