"""Tests for container wiring."""

from fit_family.adapters.supabase_user_repository import SupabaseUserRepository
from fit_family.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(container.auth_service.repository, SupabaseUserRepository)
    assert container.family_service.max_join_code_attempts == 10
    assert container.token_service.algorithm == "HS256"
    assert container.dashboard_service.repository is (
        container.food_log_service.repository
    )
