from __future__ import annotations

from .models import ActivityLevel, AgeCategory, Species

# Allometric exponent for the resting energy baseline: 70 * kg^exponent.
BASE_EXPONENTS: dict[Species, float] = {
    "cat": 0.67,
    "dog": 0.75,
}

# Life-stage coefficients applied on top of the baseline.
AGE_FACTORS: dict[Species, dict[AgeCategory, float]] = {
    "cat": {"juvenile": 2.5, "adult": 1.4, "senior": 1.2},
    "dog": {"juvenile": 2.0, "adult": 1.6, "senior": 1.3},
}

# Activity coefficients.
# - low: mostly indoors / sedentary
# - normal: typical household activity
# - high: very active or working animal
ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    "low": 0.8,
    "normal": 1.0,
    "high": 1.3,
}

# Assumed energy density of an average food.
KCAL_PER_100G = 350.0


def calculate_base_calories(species: Species, weight_kg: float) -> float:
    """Calculate the weight-derived baseline in kcal/day."""
    return weight_kg ** BASE_EXPONENTS[species] * 70


def calculate_daily_calories(
    species: Species,
    weight_kg: float,
    age_category: AgeCategory,
    activity: ActivityLevel | None = None,
) -> float:
    """Calculate daily kcal; ``activity=None`` skips the activity factor."""
    calories = calculate_base_calories(species, weight_kg) * AGE_FACTORS[species][age_category]
    if activity is not None:
        calories *= ACTIVITY_FACTORS[activity]
    return calories


def calories_to_grams(calories: float) -> float:
    return calories / KCAL_PER_100G * 100
