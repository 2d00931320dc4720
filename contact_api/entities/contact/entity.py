"""Contact domain entity and the validated request payload."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from contact_api.entities._base import Entity

NAME_PATTERN = re.compile(r"^[A-Za-z]+$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z]+\.[A-Za-z]{2,}$")
PHONE_PATTERN = re.compile(r"^\+[0-9]{2}[0-9]{10}$")
ADDRESS_PATTERN = re.compile(r"^[A-Za-z0-9\s,]*$")

CONTACT_FIELDS = ("first_name", "last_name", "email", "phone_number", "address")


class Contact(Entity):
    """A stored contact record.

    Stored records tolerate null fields; request bodies are validated by
    :class:`ContactPayload` before they reach storage.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None

    def field_values(self) -> dict[str, str | None]:
        return {name: getattr(self, name) for name in CONTACT_FIELDS}


def _require(value: str | None, pattern: re.Pattern[str], required: str, invalid: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("required", required)
    if not pattern.fullmatch(value):
        raise PydanticCustomError("pattern", invalid)
    return value


class ContactPayload(BaseModel):
    """Request body for creating or replacing a contact."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = Field(default=None, validate_default=True)
    last_name: str | None = Field(default=None, validate_default=True)
    email: str | None = Field(default=None, validate_default=True)
    phone_number: str | None = Field(default=None, validate_default=True)
    address: str | None = Field(default=None)

    @field_validator("first_name")
    @classmethod
    def _first_name(cls, value: str | None) -> str:
        return _require(
            value,
            NAME_PATTERN,
            "First name is required",
            "First name must contain only alphabetic characters",
        )

    @field_validator("last_name")
    @classmethod
    def _last_name(cls, value: str | None) -> str:
        return _require(
            value,
            NAME_PATTERN,
            "Last name is required",
            "Last name must contain only alphabetic characters",
        )

    @field_validator("email")
    @classmethod
    def _email(cls, value: str | None) -> str:
        return _require(value, EMAIL_PATTERN, "Email is required", "Email format is invalid")

    @field_validator("phone_number")
    @classmethod
    def _phone_number(cls, value: str | None) -> str:
        return _require(
            value,
            PHONE_PATTERN,
            "Phone number is required",
            "Invalid phone number format. It should start with + and countrycode",
        )

    @field_validator("address")
    @classmethod
    def _address(cls, value: str | None) -> str | None:
        if value is not None and not ADDRESS_PATTERN.fullmatch(value):
            raise PydanticCustomError("pattern", "Invalid address format")
        return value

    def to_contact(self, contact_id: int | None = None) -> Contact:
        return Contact(id=contact_id, **self.model_dump())
