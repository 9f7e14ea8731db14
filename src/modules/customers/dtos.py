"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

Empty strings sent by forms count as "not provided" for every optional
field.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    HttpUrl,
    TypeAdapter,
    field_validator,
)

_MIN_LENGTHS = {
    "name": 2,
    "address_line1": 5,
    "city": 2,
    "state_or_province": 2,
    "postal_code": 5,
}
_OPTIONAL_FIELDS = (
    "email",
    "address_line2",
    "state_or_province",
    "google_maps_pin_link",
)
_url_adapter = TypeAdapter(HttpUrl)


def _check_min_length(field: str, value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    minimum = _MIN_LENGTHS[field]
    if len(value) < minimum:
        label = field.replace("_", " ").capitalize()
        raise ValueError(f"{label} must be at least {minimum} characters.")
    return value


def _check_phone(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    if len(re.sub(r"\D", "", value)) < 10:
        raise ValueError("Phone number must contain at least 10 digits.")
    return value.strip()


def _check_map_link(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    _url_adapter.validate_python(value)
    return value


class _CustomerFields(BaseModel):
    model_config = ConfigDict(frozen=True)

    @field_validator(*_OPTIONAL_FIELDS, mode="before", check_fields=False)
    @classmethod
    def blank_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator(*_MIN_LENGTHS, check_fields=False)
    @classmethod
    def min_length(cls, v: Optional[str], info) -> Optional[str]:
        return _check_min_length(info.field_name, v)

    @field_validator("phone", check_fields=False)
    @classmethod
    def phone_has_ten_digits(cls, v: Optional[str]) -> Optional[str]:
        return _check_phone(v)

    @field_validator("google_maps_pin_link", check_fields=False)
    @classmethod
    def map_link_is_http_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_map_link(v)


class CreateCustomerDTO(_CustomerFields):
    """Immutable DTO for customer creation requests."""

    name: str
    phone: str
    address_line1: str
    city: str
    postal_code: str
    email: Optional[EmailStr] = None
    address_line2: Optional[str] = None
    state_or_province: Optional[str] = None
    google_maps_pin_link: Optional[str] = None


class UpdateCustomerDTO(_CustomerFields):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields are updated.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    email: Optional[EmailStr] = None
    address_line2: Optional[str] = None
    state_or_province: Optional[str] = None
    google_maps_pin_link: Optional[str] = None
