"""Pydantic schemas for User and Phone payloads."""

import re
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from accounts.config import get_settings

settings = get_settings()


def _validate_name(value: str) -> str:
    if not value.strip():
        raise ValueError("name must not be blank")
    return value


def _validate_email(value: str) -> str:
    if not re.match(settings.EMAIL_REGEX, value):
        raise ValueError("email has an invalid format")
    return value


def _validate_password(value: str) -> str:
    if not re.match(settings.PASSWORD_REGEX, value):
        raise ValueError("password does not meet the required format")
    return value


class PhoneRequest(BaseModel):
    number: str = Field(min_length=1, max_length=20)
    citycode: str = Field(min_length=1, max_length=10)
    countrycode: str = Field(min_length=1, max_length=10)


class PhoneRead(BaseModel):
    number: str
    citycode: str
    countrycode: str

    model_config = {"from_attributes": True}


class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    phones: Optional[list[PhoneRequest]] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _validate_name(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _validate_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return _validate_password(value)


class UserUpdate(UserCreate):
    """Full replacement. Omitting `phones` leaves the stored list untouched."""


class UserPatch(BaseModel):
    """Partial update: absent or null fields keep their stored value."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phones: Optional[list[PhoneRequest]] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _validate_name(value)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _validate_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: Optional[str]) -> Optional[str]:
        return value if value is None else _validate_password(value)


class UserRead(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    phones: list[PhoneRead] = []
    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    last_login: Optional[datetime] = None
    token: Optional[str] = None
    is_active: bool

    model_config = {"from_attributes": True}
