"""Family creation, joining and membership lookups."""

import logging
import secrets
import string
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from fit_family.domain.models import FamilyRecord, Role, UserRecord
from fit_family.errors import (
    AlreadyInFamilyError,
    FamilyNotFoundError,
    InvalidJoinCodeError,
    JoinCodeExhaustedError,
    JoinCodeTakenError,
)
from fit_family.services.auth import UserRepository

logger = logging.getLogger(__name__)

JOIN_CODE_PREFIX = "FIT-"
JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits
JOIN_CODE_LENGTH = 4
JOIN_CODE_PATTERN = rf"^{JOIN_CODE_PREFIX}[A-Z0-9]{{{JOIN_CODE_LENGTH}}}$"


def generate_join_code() -> str:
    """Return a random code such as ``FIT-A1B2``."""
    suffix = "".join(
        secrets.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH)
    )
    return f"{JOIN_CODE_PREFIX}{suffix}"


class FamilyRepository(Protocol):
    """Persistence interface for families."""

    def get_by_id(self, family_id: UUID) -> FamilyRecord | None:
        """Return a family by id, if present."""

    def get_by_join_code(self, join_code: str) -> FamilyRecord | None:
        """Return the family using this join code, if present."""

    def create_family(self, name: str, join_code: str) -> FamilyRecord:
        """Store a family; raises JoinCodeTakenError on a duplicate code."""

    def delete_family(self, family_id: UUID) -> None:
        """Remove a family row."""


@dataclass
class FamilyService:
    """Application service enforcing one family per user."""

    repository: FamilyRepository
    user_repository: UserRepository
    max_join_code_attempts: int = 10
    code_generator: Callable[[], str] = field(default=generate_join_code)

    def create_family(self, name: str, requester: UserRecord) -> FamilyRecord:
        """Create a family and make the requester its ADMIN."""
        _ensure_no_family(requester, "creating a new one")
        family = self._create_with_unique_code(name.strip())
        updated = self.user_repository.assign_family(
            requester.id, family.id, Role.ADMIN
        )
        if updated is None:
            self.repository.delete_family(family.id)
            raise AlreadyInFamilyError(_already_member_message("creating a new one"))
        logger.info("User %s created family %s", requester.id, family.id)
        return family

    def join_family(self, join_code: str, requester: UserRecord) -> UserRecord:
        """Add the requester to the family owning the join code as MEMBER."""
        _ensure_no_family(requester, "joining another one")
        family = self.repository.get_by_join_code(join_code)
        if family is None:
            raise InvalidJoinCodeError("Invalid join code. Please check and try again.")
        updated = self.user_repository.assign_family(
            requester.id, family.id, Role.MEMBER
        )
        if updated is None:
            raise AlreadyInFamilyError(_already_member_message("joining another one"))
        logger.info("User %s joined family %s", requester.id, family.id)
        return updated

    def get_my_family(self, requester: UserRecord) -> tuple[FamilyRecord, Role]:
        """Return the requester's family and their role in it."""
        if requester.family_id is None:
            raise FamilyNotFoundError("You are not a member of any family.")
        family = self.repository.get_by_id(requester.family_id)
        if family is None:
            raise FamilyNotFoundError("You are not a member of any family.")
        return family, requester.role

    def _create_with_unique_code(self, name: str) -> FamilyRecord:
        for _ in range(self.max_join_code_attempts):
            code = self.code_generator()
            if self.repository.get_by_join_code(code) is not None:
                logger.info("Join code collision, drawing again")
                continue
            try:
                return self.repository.create_family(name, code)
            except JoinCodeTakenError:
                logger.info("Join code taken concurrently, drawing again")
        raise JoinCodeExhaustedError(
            "Could not allocate a unique join code. Please try again."
        )


def _ensure_no_family(requester: UserRecord, action: str) -> None:
    if requester.family_id is not None:
        raise AlreadyInFamilyError(_already_member_message(action))


def _already_member_message(action: str) -> str:
    return (
        "You are already a member of a family. "
        f"Please leave your current family before {action}."
    )
