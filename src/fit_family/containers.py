"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from fit_family.adapters.supabase_family_repository import SupabaseFamilyRepository
from fit_family.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from fit_family.adapters.supabase_food_repository import SupabaseFoodRepository
from fit_family.adapters.supabase_user_repository import SupabaseUserRepository
from fit_family.config import Settings
from fit_family.services.auth import AuthService
from fit_family.services.catalog import CatalogService
from fit_family.services.dashboard import DashboardService
from fit_family.services.families import FamilyService
from fit_family.services.food_logs import FoodLogService
from fit_family.services.tokens import TokenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    auth_service: AuthService
    family_service: FamilyService
    catalog_service: CatalogService
    food_log_service: FoodLogService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    family_repository = SupabaseFamilyRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    token_service = TokenService(
        secret=resolved_settings.jwt_secret,
        ttl=timedelta(minutes=resolved_settings.jwt_expiration_minutes),
        algorithm=resolved_settings.jwt_algorithm,
    )
    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        auth_service=AuthService(user_repository, token_service),
        family_service=FamilyService(
            repository=family_repository,
            user_repository=user_repository,
            max_join_code_attempts=resolved_settings.join_code_max_attempts,
        ),
        catalog_service=CatalogService(food_repository),
        food_log_service=FoodLogService(
            food_repository=food_repository, repository=food_log_repository
        ),
        dashboard_service=DashboardService(
            repository=food_log_repository, user_repository=user_repository
        ),
    )
