"""Registration, login and request authentication."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from passlib.context import CryptContext

from fit_family.domain.models import Role, UserRecord
from fit_family.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from fit_family.services.tokens import TokenService

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid email or password"


class UserRepository(Protocol):
    """Persistence interface for user records."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""

    def create_user(
        self, name: str, email: str, password_hash: str, role: Role
    ) -> UserRecord:
        """Create a user; raises DuplicateEmailError if the email is taken."""

    def assign_family(
        self, user_id: UUID, family_id: UUID, role: Role
    ) -> UserRecord | None:
        """Set family and role if the user has no family yet.

        Returns the updated user, or None when the user already had a family
        at the time of the write.
        """


def default_password_context() -> CryptContext:
    """Return the password hashing context used by the application."""
    return CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass
class LoginResult:
    """Token issued on a successful login."""

    token: str
    email: str
    role: Role


@dataclass
class AuthService:
    """Application service for credentials and identity."""

    repository: UserRepository
    token_service: TokenService
    password_context: CryptContext = field(default_factory=default_password_context)

    def register(self, name: str, email: str, password: str) -> UserRecord:
        """Create a MEMBER without family, storing only the password hash."""
        normalized = _normalize_email(email)
        if self.repository.get_by_email(normalized) is not None:
            raise DuplicateEmailError(f"Email is already registered: {normalized}")
        user = self.repository.create_user(
            name=name.strip(),
            email=normalized,
            password_hash=self.password_context.hash(password),
            role=Role.MEMBER,
        )
        logger.info("Registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and issue a token."""
        user = self.repository.get_by_email(_normalize_email(email))
        if user is None or not self.password_context.verify(
            password, user.password_hash
        ):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError(_INVALID_CREDENTIALS)
        return LoginResult(
            token=self.token_service.issue(user), email=user.email, role=user.role
        )

    def authenticate(self, token: str) -> UserRecord:
        """Resolve a bearer token to the stored user it was issued for."""
        email = self.token_service.resolve_identity(token)
        user = self.repository.get_by_email(email)
        if user is None:
            raise UserNotFoundError(f"User not found with email: {email}")
        return user


def _normalize_email(email: str) -> str:
    return email.strip().lower()
