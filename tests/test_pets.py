from datetime import date

import pytest

from pet_feeding.engine import PET_PROFILE_POLICY, recommend_for_pet
from pet_feeding.errors import InvalidAge, InvalidName, InvalidSpecies, InvalidWeight
from pet_feeding.models import PetRecord, months_between, parse_species, years_between


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (date(2024, 1, 15), date(2024, 3, 15), 2),
        (date(2024, 1, 15), date(2024, 3, 14), 1),
        (date(2024, 1, 31), date(2024, 2, 28), 0),
        (date(2024, 1, 31), date(2024, 2, 29), 1),
        (date(2023, 5, 1), date(2024, 5, 1), 12),
        (date(2024, 5, 1), date(2024, 5, 1), 0),
        (date(2024, 3, 15), date(2024, 1, 15), -2),
    ],
)
def test_months_between(start: date, end: date, expected: int) -> None:
    assert months_between(start, end) == expected


def test_years_between() -> None:
    assert years_between(date(2020, 6, 10), date(2024, 6, 9)) == 3
    assert years_between(date(2020, 6, 10), date(2024, 6, 10)) == 4


@pytest.mark.parametrize(
    ("text", "expected"),
    [("cat", "cat"), ("CAT", "cat"), (" kitten ", "cat"), ("猫", "cat"), ("Dog", "dog"), ("狗狗", "dog")],
)
def test_parse_species(text: str, expected: str) -> None:
    assert parse_species(text) == expected


@pytest.mark.parametrize("text", ["", None, "bird", "cat dog"])
def test_parse_species_rejects_unknown(text) -> None:
    with pytest.raises(InvalidSpecies):
        parse_species(text)


def test_pet_age() -> None:
    pet = PetRecord(name="Mochi", species="cat", weight_kg=4.0, birthday=date(2022, 4, 10))
    assert pet.age_in_months(date(2024, 10, 9)) == 29
    assert pet.age_in_years(date(2024, 10, 9)) == 2


def test_recommend_for_pet() -> None:
    pet = PetRecord(name="Mochi", species="猫", weight_kg=4.0, birthday=date(2024, 4, 10), breed="Ragdoll")
    rec = recommend_for_pet(pet, today=date(2024, 10, 10))
    assert rec.species == "cat"
    assert rec.age_months == 6
    assert rec.age_category == "juvenile"
    assert rec.meals_per_day == 4
    assert rec.ideal_weight_range is not None
    assert rec.ideal_weight_range.min == pytest.approx(3.6)
    assert rec.ideal_weight_range.max == pytest.approx(4.4)
    assert rec.ideal_weight_range.ideal == 4.0
    assert rec.weight_status == "normal"
    assert rec.to_dict()["ideal_weight_range"]["min"] == pytest.approx(3.6)


def test_recommend_for_pet_with_pet_profile_policy() -> None:
    pet = PetRecord(name="Biscuit", species="dog", weight_kg=30.0, birthday=date(2018, 1, 1))
    today = date(2024, 2, 1)
    assert recommend_for_pet(pet, today=today).age_category == "adult"
    assert recommend_for_pet(pet, today=today, policy=PET_PROFILE_POLICY).age_category == "senior"


@pytest.mark.parametrize("name", ["", "   "])
def test_recommend_for_pet_requires_name(name: str) -> None:
    pet = PetRecord(name=name, species="dog", weight_kg=8.0, birthday=date(2020, 1, 1))
    with pytest.raises(InvalidName) as excinfo:
        recommend_for_pet(pet, today=date(2024, 1, 1))
    assert excinfo.value.field == "name"


def test_recommend_for_pet_rejects_future_birthday() -> None:
    pet = PetRecord(name="Nova", species="dog", weight_kg=8.0, birthday=date(2024, 1, 20))
    with pytest.raises(InvalidAge):
        recommend_for_pet(pet, today=date(2024, 1, 5))


def test_recommend_for_pet_rejects_unset_weight() -> None:
    pet = PetRecord(name="Nova", species="dog", weight_kg=0.0, birthday=date(2021, 1, 20))
    with pytest.raises(InvalidWeight):
        recommend_for_pet(pet, today=date(2024, 1, 5))


def test_recommend_for_pet_rejects_unknown_species() -> None:
    pet = PetRecord(name="Kiwi", species="parrot", weight_kg=0.4, birthday=date(2021, 1, 20))
    with pytest.raises(InvalidSpecies):
        recommend_for_pet(pet, today=date(2024, 1, 5))


def test_recommend_for_pet_checks_weight_before_birthday() -> None:
    pet = PetRecord(name="Nova", species="dog", weight_kg=0.0, birthday=date(2030, 1, 1))
    with pytest.raises(InvalidWeight):
        recommend_for_pet(pet, today=date(2024, 1, 5))


def test_recommend_for_pet_rejects_boolean_weight() -> None:
    pet = PetRecord(name="Nova", species="dog", weight_kg=True, birthday=date(2021, 1, 20))
    with pytest.raises(InvalidWeight):
        recommend_for_pet(pet, today=date(2024, 1, 5))
