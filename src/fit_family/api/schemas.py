"""Request and response payloads for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

import re
from datetime import date
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from fit_family.domain.food_logs import DailyDashboard, FoodLogRecord, MealType
from fit_family.domain.foods import Food
from fit_family.domain.models import FamilyRecord, Role
from fit_family.services.families import JOIN_CODE_PATTERN

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

NameStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ApiModel(BaseModel):
    """Base model serializing fields as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(ApiModel):
    name: NameStr
    email: Annotated[str, Field(pattern=EMAIL_PATTERN, max_length=255)]
    password: Annotated[str, Field(min_length=6, max_length=128)]


class RegisterResponse(ApiModel):
    id: UUID
    name: str
    email: str
    role: Role
    message: str = "User registered successfully"


class LoginRequest(ApiModel):
    email: RequiredStr
    password: Annotated[str, Field(min_length=1)]


class LoginResponse(ApiModel):
    token: str
    email: str
    role: Role
    message: str = "Login successful"


class CreateFamilyRequest(ApiModel):
    name: NameStr


class FamilyCreatedResponse(ApiModel):
    id: UUID
    name: str
    join_code: str
    message: str = (
        "Family created successfully! Share the join code with your family members."
    )

    @classmethod
    def from_family(cls, family: FamilyRecord) -> "FamilyCreatedResponse":
        return cls(id=family.id, name=family.name, join_code=family.join_code)


class JoinFamilyRequest(ApiModel):
    join_code: RequiredStr

    @field_validator("join_code")
    @classmethod
    def check_format(cls, value: str) -> str:
        """Reject codes that do not look like ``FIT-XXXX``."""
        if not re.match(JOIN_CODE_PATTERN, value):
            raise ValueError("Invalid join code format. Expected format: FIT-XXXX")
        return value


class JoinFamilyResponse(ApiModel):
    family_id: UUID
    family_name: str
    role: Role
    message: str = "Successfully joined the family!"


class MyFamilyResponse(ApiModel):
    id: UUID
    name: str
    join_code: str
    my_role: Role


class FoodPortionResponse(ApiModel):
    id: UUID
    label: str


class FoodResponse(ApiModel):
    id: UUID
    name: str
    portions: list[FoodPortionResponse]

    @classmethod
    def from_food(cls, food: Food) -> "FoodResponse":
        return cls(
            id=food.id,
            name=food.name,
            portions=[
                FoodPortionResponse(id=portion.id, label=portion.label)
                for portion in food.portions
            ],
        )


class AddFoodLogRequest(ApiModel):
    food_id: UUID
    portion_id: UUID
    meal_type: MealType


class FoodLogCreatedResponse(ApiModel):
    id: UUID
    food_name: str
    portion: str
    meal_type: MealType
    calories: float
    protein: float
    carbs: float
    fat: float
    message: str = "Food logged successfully!"

    @classmethod
    def from_record(cls, record: FoodLogRecord) -> "FoodLogCreatedResponse":
        return cls(
            id=record.id,
            food_name=record.food_name,
            portion=record.portion_label,
            meal_type=record.meal_type,
            calories=record.calories,
            protein=record.protein,
            carbs=record.carbs,
            fat=record.fat,
        )


class MacroSummaryResponse(ApiModel):
    calories: float
    protein: float
    carbs: float
    fat: float


class DashboardLogResponse(ApiModel):
    food_name: str
    portion_label: str
    calories: float
    meal_type: MealType


class DailyDashboardResponse(ApiModel):
    day: date = Field(alias="date")
    summary: MacroSummaryResponse
    food_logs: list[DashboardLogResponse]

    @classmethod
    def from_dashboard(cls, dashboard: DailyDashboard) -> "DailyDashboardResponse":
        summary = dashboard.summary
        return cls(
            day=dashboard.date,
            summary=MacroSummaryResponse(
                calories=summary.calories,
                protein=summary.protein,
                carbs=summary.carbs,
                fat=summary.fat,
            ),
            food_logs=[
                DashboardLogResponse(
                    food_name=entry.food_name,
                    portion_label=entry.portion_label,
                    calories=entry.calories,
                    meal_type=entry.meal_type,
                )
                for entry in dashboard.logs
            ],
        )


class FamilyMemberDashboardResponse(ApiModel):
    user_name: str
    dashboard: DailyDashboardResponse
