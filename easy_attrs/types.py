import weakref
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import normalize_key


class AccessMode(Enum):
    READ_ONLY = "read-only"
    WRITE_ONLY = "write-only"
    READ_WRITE = "read-write"
    INTERNAL_ONLY = "internal-only"

    @property
    def readable(self) -> bool:
        return self in (AccessMode.READ_ONLY, AccessMode.READ_WRITE)

    @property
    def writable(self) -> bool:
        return self in (AccessMode.WRITE_ONLY, AccessMode.READ_WRITE)

    @property
    def public(self) -> bool:
        return self is not AccessMode.INTERNAL_ONLY


class FieldDeclaration(BaseModel):
    """ One field name registered by one type under one access mode """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    mode: AccessMode
    # Weak so the registry never keeps a class alive
    owner_ref: weakref.ReferenceType = Field(alias='owner')

    @field_validator('name', mode='before')
    @classmethod
    def _canonical_name(cls, value: Any) -> str:
        name = normalize_key(value)
        if not name.isidentifier():
            raise ValueError(f"{name!r} is not a valid identifier")
        if name.startswith('_'):
            raise ValueError(f"{name!r} must not start with an underscore")
        return name

    @field_validator('owner_ref', mode='before')
    @classmethod
    def _weak_owner(cls, value: Any) -> Any:
        if isinstance(value, type):
            return weakref.ref(value)
        return value

    @property
    def owner(self) -> type | None:
        return self.owner_ref()

    @property
    def public(self) -> bool:
        return self.mode.public
