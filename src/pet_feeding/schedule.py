from __future__ import annotations

from typing import Literal

from .models import AgeCategory

MealPolicy = Literal["life_stage", "age_months"]
MEAL_POLICIES: tuple[MealPolicy, ...] = ("life_stage", "age_months")

MEALS_BY_AGE_CATEGORY: dict[AgeCategory, int] = {
    "juvenile": 4,
    "adult": 2,
    "senior": 2,
}

FEEDING_SCHEDULES: dict[int, tuple[str, ...]] = {
    4: ("07:00", "12:00", "17:00", "21:00"),
    3: ("08:00", "14:00", "20:00"),
    2: ("08:00", "18:00"),
}
DEFAULT_SCHEDULE = FEEDING_SCHEDULES[2]


def meals_per_day(age_category: AgeCategory, age_months: int, policy: MealPolicy = "life_stage") -> int:
    if policy == "life_stage":
        return MEALS_BY_AGE_CATEGORY[age_category]
    if policy == "age_months":
        if age_months < 6:
            return 4
        if age_months < 12:
            return 3
        return 2
    raise ValueError(f"meal policy must be one of: {', '.join(MEAL_POLICIES)}")


def feeding_times(meals: int) -> tuple[str, ...]:
    """Suggested clock times for the given number of daily meals."""
    return FEEDING_SCHEDULES.get(meals, DEFAULT_SCHEDULE)
