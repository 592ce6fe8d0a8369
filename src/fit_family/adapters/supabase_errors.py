"""Helpers for PostgREST errors raised through the Supabase client."""

from postgrest.exceptions import APIError

UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: APIError) -> bool:
    """Return True if the error is a Postgres unique constraint violation."""
    return str(exc.code) == UNIQUE_VIOLATION
