from __future__ import annotations

from pet_feeding.engine import POLICIES, compute_recommendation
from pet_feeding.models import AnimalProfile

SAMPLES = [
    AnimalProfile(species="cat", weight_kg=4.0, age_months=6),
    AnimalProfile(species="cat", weight_kg=5.0, age_months=100),
    AnimalProfile(species="dog", weight_kg=5.0, age_months=9),
    AnimalProfile(species="dog", weight_kg=6.0, age_months=90),
    AnimalProfile(species="dog", weight_kg=20.0, age_months=36, activity="high"),
    AnimalProfile(species="dog", weight_kg=30.0, age_months=78),
]


def main() -> None:
    for profile in SAMPLES:
        print(f"{profile.species} {profile.weight_kg}kg {profile.age_months}mo activity={profile.activity}")
        for name, policy in POLICIES.items():
            rec = compute_recommendation(profile, policy)
            print(
                f"  {name:<12} {rec.age_category:<8} kcal={rec.daily_calories:7.1f} "
                f"grams={rec.daily_food_grams:6.1f} meals={rec.meals_per_day} "
                f"times={','.join(rec.feeding_times)}"
            )


if __name__ == "__main__":
    main()
