from __future__ import annotations

from typing import Literal

from .models import AgeCategory, SizeBand, Species

DogAgePolicy = Literal["simple", "size_adjusted"]
DOG_AGE_POLICIES: tuple[DogAgePolicy, ...] = ("simple", "size_adjusted")

JUVENILE_UNTIL_MONTHS = 12
CAT_ADULT_UNTIL_MONTHS = 84
DOG_ADULT_UNTIL_MONTHS = 84

# Smaller dogs age later; months before a dog counts as senior.
DOG_ADULT_UNTIL_MONTHS_BY_SIZE: dict[SizeBand, int] = {
    "small": 96,
    "medium": 84,
    "large": 72,
}


def dog_size_band(weight_kg: float) -> SizeBand:
    if weight_kg < 10:
        return "small"
    if weight_kg < 25:
        return "medium"
    return "large"


def _bucket(age_months: int, adult_until: int) -> AgeCategory:
    if age_months < JUVENILE_UNTIL_MONTHS:
        return "juvenile"
    if age_months < adult_until:
        return "adult"
    return "senior"


def determine_age_category(
    species: Species,
    age_months: int,
    weight_kg: float,
    dog_policy: DogAgePolicy = "simple",
) -> AgeCategory:
    """Bucket an animal into a life stage.

    Cats share one set of thresholds. Dogs use either the flat
    ``"simple"`` thresholds or ``"size_adjusted"`` ones, where the senior
    cutoff depends on the size band derived from weight.
    """
    if species == "cat":
        return _bucket(age_months, CAT_ADULT_UNTIL_MONTHS)
    if dog_policy == "simple":
        return _bucket(age_months, DOG_ADULT_UNTIL_MONTHS)
    if dog_policy == "size_adjusted":
        return _bucket(age_months, DOG_ADULT_UNTIL_MONTHS_BY_SIZE[dog_size_band(weight_kg)])
    raise ValueError(f"dog_policy must be one of: {', '.join(DOG_AGE_POLICIES)}")
