"""Static feeding guide content.

These are hand-written reference notes per species and life stage. The
calorie figures are quoted per pound of body weight and are kept as text
on purpose: they come from a different rule of thumb than the engine in
``pet_feeding.energy`` and are never compared against it.
"""
from __future__ import annotations

from dataclasses import dataclass

from .models import AgeCategory, Species

AGE_RANGE_LABELS: dict[AgeCategory, str] = {
    "juvenile": "0-12 months",
    "adult": "1-7 years",
    "senior": "7 years and older",
}


@dataclass(frozen=True)
class FeedingGuide:
    species: Species
    age_category: AgeCategory
    daily_meals: str
    meal_timing: str
    nutrition_focus: tuple[str, ...]
    important_notes: tuple[str, ...]
    calories: str

    @property
    def age_range(self) -> str:
        return AGE_RANGE_LABELS[self.age_category]


CAT_GUIDES: tuple[FeedingGuide, ...] = (
    FeedingGuide(
        species="cat",
        age_category="juvenile",
        daily_meals="4-6 meals",
        meal_timing="Every 3-4 hours",
        nutrition_focus=(
            "High protein content (50-60%)",
            "High fat for energy",
            "Easily digestible quality protein",
            "Plenty of taurine",
            "Appropriate calcium to phosphorus ratio",
        ),
        important_notes=(
            "Kittens grow fast and need ample nutrition",
            "Before 6 months they need about 60-65 kcal per lb of body weight a day",
            "Move gradually from milk or formula to solid food",
            "Serve food at a comfortable temperature",
            "Always provide clean drinking water",
        ),
        calories="60-65 kcal per lb body weight per day",
    ),
    FeedingGuide(
        species="cat",
        age_category="adult",
        daily_meals="2-3 meals",
        meal_timing="Fixed times morning and evening",
        nutrition_focus=(
            "Quality animal protein (cats are obligate carnivores)",
            "Moderate fat to maintain weight",
            "Essential fatty acids for skin and coat",
            "Taurine for heart and eye health",
            "Limited carbohydrates",
        ),
        important_notes=(
            "Adult metabolism is stable",
            "Avoid overfeeding to prevent obesity",
            "Regular meal times help digestion",
            "Keep track of weight changes",
            "Provide plenty of fresh water",
        ),
        calories="20-30 kcal per lb body weight per day",
    ),
    FeedingGuide(
        species="cat",
        age_category="senior",
        daily_meals="2-3 meals",
        meal_timing="Small frequent meals to ease digestion",
        nutrition_focus=(
            "Easily digestible quality protein",
            "More protein to preserve muscle",
            "Lower phosphorus to protect the kidneys",
            "Antioxidants against ageing",
            "Moderate fibre for gut health",
        ),
        important_notes=(
            "Protein metabolism declines with age",
            "Watch kidney and heart health",
            "Food may need to be softened",
            "Adjust the diet after regular check-ups",
            "Keep a healthy weight to spare the joints",
        ),
        calories="Adjust to activity; usually a little less than adults",
    ),
)

DOG_GUIDES: tuple[FeedingGuide, ...] = (
    FeedingGuide(
        species="dog",
        age_category="juvenile",
        daily_meals="3-4 meals",
        meal_timing="Every 4-6 hours",
        nutrition_focus=(
            "High protein for growth",
            "Moderate fat for energy",
            "Balanced calcium and phosphorus for bone development",
            "DHA for brain development",
            "Easily digestible nutrients",
        ),
        important_notes=(
            "Puppies have high nutritional needs while growing",
            "Growth is mostly complete at 8-10 months",
            "Large and small breeds have different needs",
            "Overfeeding can harm bone development",
            "Switch to adult food after 12 months",
        ),
        calories="Depends on breed size; small breeds need more per kg",
    ),
    FeedingGuide(
        species="dog",
        age_category="adult",
        daily_meals="1-2 meals",
        meal_timing="Once in the morning and once in the evening, or once a day",
        nutrition_focus=(
            "Balanced protein, fat and carbohydrates",
            "Mostly quality animal protein",
            "Moderate fibre for digestion",
            "Essential fatty acids for the coat",
            "Balanced vitamins and minerals",
        ),
        important_notes=(
            "Adult metabolism is stable",
            "Adjust portions to activity level",
            "Avoid vigorous exercise right after meals",
            "Monitor weight and body condition regularly",
            "Choose a food suited to body size",
        ),
        calories="Calculated from weight, age and activity",
    ),
    FeedingGuide(
        species="dog",
        age_category="senior",
        daily_meals="2-3 meals",
        meal_timing="Small frequent meals for easier digestion",
        nutrition_focus=(
            "Easily digestible quality protein",
            "Fewer calories to control weight",
            "Lower sodium to protect the heart",
            "Glucosamine for joint health",
            "Antioxidants against ageing",
        ),
        important_notes=(
            "Metabolism slows down with age",
            "A dedicated senior food may be needed",
            "Mind dental health and soften food if necessary",
            "Adjust the diet after regular check-ups",
            "Combine the diet with moderate exercise",
        ),
        calories="10-20% less than adults",
    ),
)


def all_guides() -> tuple[FeedingGuide, ...]:
    return CAT_GUIDES + DOG_GUIDES


def guides_for(species: Species) -> tuple[FeedingGuide, ...]:
    if species == "cat":
        return CAT_GUIDES
    if species == "dog":
        return DOG_GUIDES
    raise ValueError("species must be one of: cat, dog")


def guide_for(species: Species, age_category: AgeCategory) -> FeedingGuide:
    for guide in guides_for(species):
        if guide.age_category == age_category:
            return guide
    raise ValueError(f"no guide for {species}/{age_category}")
