"""Role domain entity."""

from enum import StrEnum

from pydantic import Field

from contact_api.entities._base import Entity


class RoleName(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


class Role(Entity):
    """A named authority granted to users."""

    name: RoleName = Field(description="Role name")
