"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from fit_family.adapters.supabase_errors import is_unique_violation
from fit_family.domain.models import Role, UserRecord
from fit_family.errors import DuplicateEmailError
from fit_family.services.auth import UserRepository

_USER_COLUMNS = "id, name, email, password_hash, role, family_id, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(
        self, name: str, email: str, password_hash: str, role: Role
    ) -> UserRecord:
        """Create a new user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "name": name,
                        "email": email,
                        "password_hash": password_hash,
                        "role": str(role),
                    }
                )
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc):
                raise DuplicateEmailError(
                    f"Email is already registered: {email}"
                ) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def assign_family(
        self, user_id: UUID, family_id: UUID, role: Role
    ) -> UserRecord | None:
        """Set family and role only while the user's family is still null."""
        response = (
            self.client.table("users")
            .update({"family_id": str(family_id), "role": str(role)})
            .eq("id", str(user_id))
            .is_("family_id", "null")
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    family_id = row.get("family_id")
    created_at = row.get("created_at")
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row["email"]),
        password_hash=str(row.get("password_hash", "")),
        role=Role(str(row.get("role") or Role.MEMBER)),
        family_id=UUID(str(family_id)) if family_id else None,
        created_at=datetime.fromisoformat(created_at)
        if isinstance(created_at, str) and created_at
        else None,
    )
