"""Feeding recommendation engine.

Pure functions from an animal's species, weight and age to daily calories,
food mass, meal count and schedule. Nothing here holds state, so every
entry point may be called concurrently.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Any

from .energy import calculate_daily_calories, calories_to_grams
from .errors import InvalidAge, InvalidName, InvalidWeight
from .lifestage import DOG_AGE_POLICIES, DogAgePolicy, determine_age_category
from .logging_utils import get_logger
from .models import ACTIVITY_LEVELS, ActivityLevel, AgeCategory, AnimalProfile, PetRecord, Species, parse_species
from .schedule import MEAL_POLICIES, MealPolicy, feeding_times, meals_per_day
from .tips import DEFAULT_LOCALE, nutrition_tips

logger = get_logger(__name__)


@dataclass(frozen=True)
class FeedingPolicy:
    """A named set of business rules for the engine.

    The pet profile screen and the standalone calculator disagree on dog
    life stages, meal counts and whether activity counts. Each variant is
    kept as its own policy instead of blending them.
    """

    name: str
    dog_age_policy: DogAgePolicy = "simple"
    meal_policy: MealPolicy = "life_stage"
    apply_activity: bool = True

    def __post_init__(self) -> None:
        if self.dog_age_policy not in DOG_AGE_POLICIES:
            raise ValueError(f"dog_age_policy must be one of: {', '.join(DOG_AGE_POLICIES)}")
        if self.meal_policy not in MEAL_POLICIES:
            raise ValueError(f"meal_policy must be one of: {', '.join(MEAL_POLICIES)}")


DEFAULT_POLICY = FeedingPolicy("default")
PET_PROFILE_POLICY = FeedingPolicy("pet_profile", dog_age_policy="size_adjusted", apply_activity=False)
CALCULATOR_POLICY = FeedingPolicy("calculator", meal_policy="age_months")

POLICIES: dict[str, FeedingPolicy] = {
    policy.name: policy for policy in (DEFAULT_POLICY, PET_PROFILE_POLICY, CALCULATOR_POLICY)
}


def get_policy(name: str) -> FeedingPolicy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"policy must be one of: {', '.join(POLICIES)}") from None


@dataclass(frozen=True)
class IdealWeightRange:
    """+/-10% around the current weight; not breed-specific."""

    min: float
    max: float
    ideal: float

    @classmethod
    def around(cls, weight_kg: float) -> IdealWeightRange:
        return cls(min=weight_kg * 0.9, max=weight_kg * 1.1, ideal=weight_kg)

    def status(self, weight_kg: float) -> str:
        if weight_kg < self.min:
            return "underweight"
        if weight_kg > self.max:
            return "overweight"
        return "normal"


@dataclass(frozen=True)
class FeedingRecommendation:
    species: Species
    weight_kg: float
    age_months: int
    age_category: AgeCategory
    activity: ActivityLevel
    policy: str
    daily_calories: float
    daily_food_grams: float
    meals_per_day: int
    grams_per_meal: float
    feeding_times: tuple[str, ...]
    nutrition_tips: tuple[str, ...]
    ideal_weight_range: IdealWeightRange | None = None

    @property
    def formatted_daily_amount(self) -> str:
        return f"{self.daily_food_grams:.0f}g"

    @property
    def formatted_meal_size(self) -> str:
        return f"{self.grams_per_meal:.0f}g"

    @property
    def weight_status(self) -> str | None:
        if self.ideal_weight_range is None:
            return None
        return self.ideal_weight_range.status(self.weight_kg)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["feeding_times"] = list(self.feeding_times)
        data["nutrition_tips"] = list(self.nutrition_tips)
        data["weight_status"] = self.weight_status
        return data


def _validated_weight(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidWeight(f"weight_kg must be a number, got {value!r}")
    weight = float(value)
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight()
    return weight


def _validated_age(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAge(f"age_months must be a whole number of months, got {value!r}")
    if value < 0:
        raise InvalidAge()
    return value


def compute_recommendation(
    profile: AnimalProfile,
    policy: FeedingPolicy = DEFAULT_POLICY,
    locale: str = DEFAULT_LOCALE,
) -> FeedingRecommendation:
    """Compute a feeding recommendation for ``profile``.

    Raises one of ``InvalidSpecies``, ``InvalidWeight`` or ``InvalidAge``
    on the first invalid field; no partial result is produced.
    """
    species = parse_species(profile.species)
    weight_kg = _validated_weight(profile.weight_kg)
    age_months = _validated_age(profile.age_months)
    if profile.activity not in ACTIVITY_LEVELS:
        raise ValueError("activity must be one of: low, normal, high")

    age_category = determine_age_category(species, age_months, weight_kg, policy.dog_age_policy)
    daily_calories = calculate_daily_calories(
        species,
        weight_kg,
        age_category,
        profile.activity if policy.apply_activity else None,
    )
    daily_food_grams = calories_to_grams(daily_calories)
    meals = meals_per_day(age_category, age_months, policy.meal_policy)

    logger.debug(
        "recommendation species=%s weight_kg=%s age_months=%s category=%s policy=%s kcal=%.1f",
        species,
        weight_kg,
        age_months,
        age_category,
        policy.name,
        daily_calories,
    )
    return FeedingRecommendation(
        species=species,
        weight_kg=weight_kg,
        age_months=age_months,
        age_category=age_category,
        activity=profile.activity,
        policy=policy.name,
        daily_calories=daily_calories,
        daily_food_grams=daily_food_grams,
        meals_per_day=meals,
        grams_per_meal=daily_food_grams / meals,
        feeding_times=feeding_times(meals),
        nutrition_tips=nutrition_tips(species, age_category, locale),
    )


def recommend_for_pet(
    pet: PetRecord,
    *,
    today: date | None = None,
    policy: FeedingPolicy = DEFAULT_POLICY,
    activity: ActivityLevel = "normal",
    locale: str = DEFAULT_LOCALE,
) -> FeedingRecommendation:
    """Full recommendation for a stored pet, including an ideal weight range."""
    if not pet.name.strip():
        raise InvalidName()
    species = parse_species(pet.species)
    weight_kg = _validated_weight(pet.weight_kg)
    today = today or date.today()
    if pet.birthday > today:
        raise InvalidAge("Birthday cannot be in the future")
    age_months = pet.age_in_months(today)

    profile = AnimalProfile(
        species=species,
        weight_kg=weight_kg,
        age_months=age_months,
        activity=activity,
        name=pet.name.strip(),
    )
    recommendation = compute_recommendation(profile, policy, locale)
    return replace(
        recommendation,
        ideal_weight_range=IdealWeightRange.around(recommendation.weight_kg),
    )
