"""Supabase-backed family repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from fit_family.adapters.supabase_errors import is_unique_violation
from fit_family.domain.models import FamilyRecord
from fit_family.errors import JoinCodeTakenError
from fit_family.services.families import FamilyRepository

_FAMILY_COLUMNS = "id, name, join_code, created_at"


@dataclass
class SupabaseFamilyRepository(FamilyRepository):
    """Supabase implementation for families."""

    client: Client

    def get_by_id(self, family_id: UUID) -> FamilyRecord | None:
        """Return a family by id, if present."""
        response = (
            self.client.table("families")
            .select(_FAMILY_COLUMNS)
            .eq("id", str(family_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_family(response.data[0])
        return None

    def get_by_join_code(self, join_code: str) -> FamilyRecord | None:
        """Return the family using this join code, if present."""
        response = (
            self.client.table("families")
            .select(_FAMILY_COLUMNS)
            .eq("join_code", join_code)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_family(response.data[0])
        return None

    def create_family(self, name: str, join_code: str) -> FamilyRecord:
        """Insert a family row; the unique index on join_code rejects reuse."""
        try:
            response = (
                self.client.table("families")
                .insert({"name": name, "join_code": join_code})
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc):
                raise JoinCodeTakenError(join_code) from exc
            raise
        if not response.data:
            raise RuntimeError("Failed to create family")
        return _parse_family(response.data[0])

    def delete_family(self, family_id: UUID) -> None:
        """Delete a family row."""
        self.client.table("families").delete().eq("id", str(family_id)).execute()


def _parse_family(row: dict[str, object]) -> FamilyRecord:
    created_at = row.get("created_at")
    return FamilyRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        join_code=str(row["join_code"]),
        created_at=datetime.fromisoformat(created_at)
        if isinstance(created_at, str) and created_at
        else None,
    )
