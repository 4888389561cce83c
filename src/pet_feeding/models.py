from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Literal

from .errors import InvalidSpecies

Species = Literal["cat", "dog"]
ActivityLevel = Literal["low", "normal", "high"]
AgeCategory = Literal["juvenile", "adult", "senior"]
SizeBand = Literal["small", "medium", "large"]

SPECIES: tuple[Species, ...] = ("cat", "dog")
ACTIVITY_LEVELS: tuple[ActivityLevel, ...] = ("low", "normal", "high")
AGE_CATEGORIES: tuple[AgeCategory, ...] = ("juvenile", "adult", "senior")

# Free-text species as entered on pet records.
SPECIES_ALIASES: dict[str, Species] = {
    "cat": "cat",
    "cats": "cat",
    "kitten": "cat",
    "猫": "cat",
    "猫咪": "cat",
    "dog": "dog",
    "dogs": "dog",
    "puppy": "dog",
    "狗": "dog",
    "狗狗": "dog",
}


def parse_species(value: str | None) -> Species:
    """Map free-form species text onto the closed species set."""
    normalized = (value or "").strip().casefold()
    if not normalized:
        raise InvalidSpecies("Species cannot be empty")
    species = SPECIES_ALIASES.get(normalized)
    if species is None:
        raise InvalidSpecies(f"Unknown species {value!r}; expected one of: cat, dog")
    return species


@dataclass(frozen=True)
class AnimalProfile:
    """Inputs for a single feeding recommendation.

    Values are checked by the engine, not here, so that every failure
    surfaces as one of the typed errors in ``pet_feeding.errors``.
    """

    species: Species
    weight_kg: float
    age_months: int
    activity: ActivityLevel = "normal"
    name: str = ""


def months_between(start: date, end: date) -> int:
    """Whole calendar months elapsed from ``start`` to ``end``.

    A month is counted once its anniversary day is reached; anniversaries
    falling past the end of a shorter month clamp to its last day, so
    Jan 31 -> Feb 29 counts as one month.
    """
    if end < start:
        return -months_between(end, start)
    months = (end.year - start.year) * 12 + (end.month - start.month)
    last_day = calendar.monthrange(end.year, end.month)[1]
    if end.day < min(start.day, last_day):
        months -= 1
    return months


def years_between(start: date, end: date) -> int:
    months = months_between(start, end)
    if months < 0:
        return -((-months) // 12)
    return months // 12


@dataclass(frozen=True)
class PetRecord:
    """A stored pet as handed over by the app's persistence layer."""

    name: str
    species: str
    weight_kg: float
    birthday: date
    breed: str = ""
    gender: str = ""

    def age_in_months(self, today: date | None = None) -> int:
        return months_between(self.birthday, today or date.today())

    def age_in_years(self, today: date | None = None) -> int:
        return years_between(self.birthday, today or date.today())
