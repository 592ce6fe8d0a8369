"""Tests for daily dashboards."""

from datetime import date

import pytest

from fit_family.domain.food_logs import MealType
from fit_family.domain.models import Role
from fit_family.services.catalog import CatalogService
from fit_family.services.dashboard import UNKNOWN_MEMBER, DashboardService
from fit_family.services.food_logs import FoodLogService
from tests.conftest import (
    InMemoryFoodLogRepository,
    InMemoryFoodRepository,
    InMemoryUserRepository,
    make_user,
)

DAY = date(2024, 5, 1)


@pytest.fixture
def foods() -> InMemoryFoodRepository:
    repository = InMemoryFoodRepository()
    CatalogService(repository).seed()
    return repository


@pytest.fixture
def logs(foods: InMemoryFoodRepository) -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository(foods)


def _log(  # noqa: PLR0913
    foods, logs, user, food_name, label, meal_type, day=DAY
) -> None:
    food = foods.find(food_name)
    portion = next(p for p in food.portions if p.label == label)
    FoodLogService(foods, logs, today=lambda: day).add_log(
        user, food.id, portion.id, meal_type
    )


def test_user_daily_sums_logs(foods, logs) -> None:
    users = InMemoryUserRepository()
    john = users.create_user("John", "john@example.com", "hash", Role.MEMBER)
    _log(foods, logs, john, "Rice", "1 bowl", MealType.LUNCH)
    _log(foods, logs, john, "Chicken Breast", "100g", MealType.LUNCH)
    _log(foods, logs, john, "Rice", "100g", MealType.DINNER, day=date(2024, 5, 2))

    dashboard = DashboardService(logs, users).user_daily_dashboard(john, DAY)

    assert dashboard.date == DAY
    assert dashboard.summary.calories == pytest.approx(425.0)
    assert dashboard.summary.protein == pytest.approx(36.4)
    assert [entry.food_name for entry in dashboard.logs] == ["Rice", "Chicken Breast"]
    assert dashboard.logs[0].portion_label == "1 bowl"
    assert dashboard.logs[0].meal_type is MealType.LUNCH


def test_user_daily_for_empty_day_is_zero(logs) -> None:
    users = InMemoryUserRepository()
    john = users.create_user("John", "john@example.com", "hash", Role.MEMBER)

    dashboard = DashboardService(logs, users).user_daily_dashboard(john, DAY)

    assert dashboard.logs == []
    assert dashboard.summary.calories == 0
    assert dashboard.summary.protein == 0
    assert dashboard.summary.carbs == 0
    assert dashboard.summary.fat == 0


def test_family_daily_without_family_is_empty(logs) -> None:
    service = DashboardService(logs, InMemoryUserRepository())

    assert service.family_daily_dashboard(make_user(), DAY) == []


def test_family_daily_groups_by_member(foods, logs) -> None:
    users = InMemoryUserRepository()
    john = users.create_user("John", "john@example.com", "hash", Role.MEMBER)
    jane = users.create_user("Jane", "jane@example.com", "hash", Role.MEMBER)
    family_id = make_user().id
    john = users.assign_family(john.id, family_id, Role.ADMIN)
    jane = users.assign_family(jane.id, family_id, Role.MEMBER)
    _log(foods, logs, john, "Rice", "100g", MealType.BREAKFAST)
    _log(foods, logs, jane, "Chapati", "1 small (40g)", MealType.BREAKFAST)
    _log(foods, logs, john, "Chicken Breast", "100g", MealType.LUNCH)
    _log(foods, logs, jane, "Rice", "1 bowl", MealType.DINNER)

    members = DashboardService(logs, users).family_daily_dashboard(jane, DAY)

    assert [member.user_name for member in members] == ["John", "Jane"]
    assert all(len(member.dashboard.logs) == 2 for member in members)
    assert members[0].dashboard.summary.calories == pytest.approx(295.0)


def test_family_daily_names_missing_member_unknown(foods, logs) -> None:
    users = InMemoryUserRepository()
    family_id = make_user().id
    ghost = make_user(name="Ghost", email="ghost@example.com", family_id=family_id)
    _log(foods, logs, ghost, "Rice", "100g", MealType.SNACK)

    members = DashboardService(logs, users).family_daily_dashboard(ghost, DAY)

    assert [member.user_name for member in members] == [UNKNOWN_MEMBER]


def test_logs_keep_the_family_they_were_created_with(foods, logs) -> None:
    users = InMemoryUserRepository()
    john = users.create_user("John", "john@example.com", "hash", Role.MEMBER)
    _log(foods, logs, john, "Rice", "100g", MealType.BREAKFAST)
    family_id = make_user().id
    john = users.assign_family(john.id, family_id, Role.ADMIN)
    _log(foods, logs, john, "Chicken Breast", "100g", MealType.LUNCH)
    service = DashboardService(logs, users)

    members = service.family_daily_dashboard(john, DAY)
    own = service.user_daily_dashboard(john, DAY)

    assert len(members) == 1
    assert [entry.food_name for entry in members[0].dashboard.logs] == [
        "Chicken Breast"
    ]
    assert [entry.food_name for entry in own.logs] == ["Rice", "Chicken Breast"]
