"""Domain models for users and families."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class Role(StrEnum):
    """Role of a user inside their family."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    password_hash: str
    role: Role
    family_id: UUID | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class FamilyRecord:
    """A family group admitting members through its join code."""

    id: UUID
    name: str
    join_code: str
    created_at: datetime | None = None
