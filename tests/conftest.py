"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from fit_family.config import Settings
from fit_family.containers import AppContainer
from fit_family.domain.food_logs import FoodLogRecord, NewFoodLog
from fit_family.domain.foods import Food, FoodPortion
from fit_family.domain.models import FamilyRecord, Role, UserRecord
from fit_family.errors import DuplicateEmailError, JoinCodeTakenError
from fit_family.services.auth import AuthService, UserRepository
from fit_family.services.catalog import CatalogService, FoodRepository, SeedFood
from fit_family.services.dashboard import DashboardService
from fit_family.services.families import FamilyRepository, FamilyService
from fit_family.services.food_logs import FoodLogRepository, FoodLogService
from fit_family.services.tokens import TokenService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_email(self, email: str) -> UserRecord | None:
        return next(
            (user for user in self.users.values() if user.email == email), None
        )

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(
        self, name: str, email: str, password_hash: str, role: Role
    ) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError(f"Email is already registered: {email}")
        user = UserRecord(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=datetime.now(tz=UTC),
        )
        self.users[user.id] = user
        return user

    def assign_family(
        self, user_id: UUID, family_id: UUID, role: Role
    ) -> UserRecord | None:
        user = self.users.get(user_id)
        if user is None or user.family_id is not None:
            return None
        updated = replace(user, family_id=family_id, role=role)
        self.users[user_id] = updated
        return updated


@dataclass
class InMemoryFamilyRepository(FamilyRepository):
    """In-memory family repository for tests.

    Codes listed in ``taken_on_insert`` are invisible to lookups but rejected
    on insert, the way a concurrent writer would win the unique index.
    """

    families: dict[UUID, FamilyRecord] = field(default_factory=dict)
    taken_on_insert: set[str] = field(default_factory=set)
    deleted: list[UUID] = field(default_factory=list)

    def get_by_id(self, family_id: UUID) -> FamilyRecord | None:
        return self.families.get(family_id)

    def get_by_join_code(self, join_code: str) -> FamilyRecord | None:
        return next(
            (
                family
                for family in self.families.values()
                if family.join_code == join_code
            ),
            None,
        )

    def create_family(self, name: str, join_code: str) -> FamilyRecord:
        if (
            join_code in self.taken_on_insert
            or self.get_by_join_code(join_code) is not None
        ):
            raise JoinCodeTakenError(join_code)
        family = FamilyRecord(id=uuid4(), name=name, join_code=join_code)
        self.families[family.id] = family
        return family

    def delete_family(self, family_id: UUID) -> None:
        self.families.pop(family_id, None)
        self.deleted.append(family_id)


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    def count_foods(self) -> int:
        return len(self.foods)

    def search_foods(self, query: str) -> list[Food]:
        needle = query.lower()
        return sorted(
            (food for food in self.foods.values() if needle in food.name.lower()),
            key=lambda food: food.name,
        )

    def get_food(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def get_portion(self, portion_id: UUID) -> FoodPortion | None:
        for food in self.foods.values():
            for portion in food.portions:
                if portion.id == portion_id:
                    return portion
        return None

    def create_food(self, seed: SeedFood) -> Food:
        food_id = uuid4()
        food = Food(
            id=food_id,
            name=seed.name,
            calories_per_100g=seed.calories,
            protein_per_100g=seed.protein,
            carbs_per_100g=seed.carbs,
            fat_per_100g=seed.fat,
            portions=[
                FoodPortion(id=uuid4(), food_id=food_id, label=label, grams=grams)
                for label, grams in seed.portions
            ],
            created_at=datetime.now(tz=UTC),
        )
        self.foods[food_id] = food
        return food

    def find(self, name: str) -> Food:
        """Return the stored food with this exact name."""
        return next(food for food in self.foods.values() if food.name == name)


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    food_repository: InMemoryFoodRepository
    logs: list[FoodLogRecord] = field(default_factory=list)

    def create_food_log(self, log: NewFoodLog) -> FoodLogRecord:
        food = self.food_repository.get_food(log.food_id)
        portion = self.food_repository.get_portion(log.portion_id)
        record = FoodLogRecord(
            id=uuid4(),
            user_id=log.user_id,
            family_id=log.family_id,
            food_id=log.food_id,
            portion_id=log.portion_id,
            food_name=food.name if food else "",
            portion_label=portion.label if portion else "",
            calories=log.macros.calories,
            protein=log.macros.protein,
            carbs=log.macros.carbs,
            fat=log.macros.fat,
            meal_type=log.meal_type,
            log_date=log.log_date,
            created_at=datetime.now(tz=UTC),
        )
        self.logs.append(record)
        return record

    def list_for_user(self, user_id: UUID, day: date) -> list[FoodLogRecord]:
        return [
            log for log in self.logs if log.user_id == user_id and log.log_date == day
        ]

    def list_for_family(self, family_id: UUID, day: date) -> list[FoodLogRecord]:
        return [
            log
            for log in self.logs
            if log.family_id == family_id and log.log_date == day
        ]

    def delete_owned(self, log_id: UUID, user_id: UUID) -> bool:
        for index, log in enumerate(self.logs):
            if log.id == log_id and log.user_id == user_id:
                del self.logs[index]
                return True
        return False


def make_user(
    name: str = "John",
    email: str = "john@example.com",
    role: Role = Role.MEMBER,
    family_id: UUID | None = None,
) -> UserRecord:
    """Build a user record that is not stored anywhere."""
    return UserRecord(
        id=uuid4(),
        name=name,
        email=email,
        password_hash="not-a-real-hash",
        role=role,
        family_id=family_id,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        jwt_secret="test-secret-key-that-is-long-enough-for-hs256",
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def family_repository() -> InMemoryFamilyRepository:
    return InMemoryFamilyRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def food_log_repository(
    food_repository: InMemoryFoodRepository,
) -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository(food_repository)


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret,
        ttl=timedelta(minutes=settings.jwt_expiration_minutes),
        algorithm=settings.jwt_algorithm,
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    token_service: TokenService,
    user_repository: InMemoryUserRepository,
    family_repository: InMemoryFamilyRepository,
    food_repository: InMemoryFoodRepository,
    food_log_repository: InMemoryFoodLogRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        token_service=token_service,
        auth_service=AuthService(user_repository, token_service),
        family_service=FamilyService(
            repository=family_repository,
            user_repository=user_repository,
            max_join_code_attempts=settings.join_code_max_attempts,
        ),
        catalog_service=CatalogService(food_repository),
        food_log_service=FoodLogService(
            food_repository=food_repository, repository=food_log_repository
        ),
        dashboard_service=DashboardService(
            repository=food_log_repository, user_repository=user_repository
        ),
    )
