import pytest

from pet_feeding.guide import all_guides, guide_for, guides_for
from pet_feeding.tips import NUTRITION_TIPS, nutrition_tips


def test_guides_cover_every_life_stage() -> None:
    guides = all_guides()
    assert len(guides) == 6
    assert {(g.species, g.age_category) for g in guides} == {
        (species, stage) for species in ("cat", "dog") for stage in ("juvenile", "adult", "senior")
    }
    assert all(g.nutrition_focus and g.important_notes for g in guides)


def test_guides_for_species() -> None:
    assert [g.age_category for g in guides_for("dog")] == ["juvenile", "adult", "senior"]
    with pytest.raises(ValueError):
        guides_for("fish")


def test_cat_guide_quotes_per_pound_calories() -> None:
    assert "60-65" in guide_for("cat", "juvenile").calories
    assert "20-30" in guide_for("cat", "adult").calories
    assert guide_for("cat", "senior").age_range == "7 years and older"


def test_tips_tables_match_across_locales() -> None:
    assert set(NUTRITION_TIPS["en"]) == set(NUTRITION_TIPS["zh"])
    for key, tips in NUTRITION_TIPS["en"].items():
        assert len(tips) == len(NUTRITION_TIPS["zh"][key])


def test_nutrition_tips_unknown_locale() -> None:
    assert nutrition_tips("dog", "senior")[0] == "Choose a low-sodium senior dog food"
    with pytest.raises(ValueError):
        nutrition_tips("dog", "senior", "fr")
