from datetime import date

import streamlit as st

from pet_feeding.config import load_settings
from pet_feeding.engine import POLICIES, FeedingRecommendation, compute_recommendation, get_policy, recommend_for_pet
from pet_feeding.errors import FeedingValidationError
from pet_feeding.guide import guides_for
from pet_feeding.logging_utils import init_logging
from pet_feeding.models import ACTIVITY_LEVELS, AnimalProfile, PetRecord
from pet_feeding.tips import LOCALES

settings = load_settings()
init_logging(settings.log_level)

st.set_page_config(page_title="Pet Feeding Planner", page_icon="🐾", layout="wide")
st.title("🐾 Pet Feeding Planner")

species_labels = {"cat": "Cat", "dog": "Dog"}

st.sidebar.markdown("### Settings")
policy_name = st.sidebar.selectbox("Policy", list(POLICIES), index=list(POLICIES).index(settings.policy))
locale = st.sidebar.selectbox("Tips language", list(LOCALES), index=list(LOCALES).index(settings.locale))
policy = get_policy(policy_name)
st.sidebar.caption(
    f"dog ages: {policy.dog_age_policy} | meals: {policy.meal_policy} | activity: {'on' if policy.apply_activity else 'off'}"
)

page = st.sidebar.radio("Page", ["Calculator", "My pet", "Feeding guide"])


def show_recommendation(rec: FeedingRecommendation) -> None:
    cols = st.columns(4)
    cols[0].metric("Daily food", rec.formatted_daily_amount)
    cols[1].metric("Per meal", rec.formatted_meal_size)
    cols[2].metric("Meals", f"{rec.meals_per_day} / day")
    cols[3].metric("Energy", f"{rec.daily_calories:.0f} kcal")
    st.caption(f"Life stage: {rec.age_category} | age: {rec.age_months} months")

    st.subheader("Feeding times")
    st.write("  ·  ".join(rec.feeding_times))

    st.subheader("Nutrition tips")
    for tip in rec.nutrition_tips:
        st.write(f"- {tip}")

    if rec.ideal_weight_range is not None:
        r = rec.ideal_weight_range
        st.subheader("Weight")
        st.write(f"Ideal range: {r.min:.1f} - {r.max:.1f} kg (current {r.ideal:.1f} kg) | status: {rec.weight_status}")


if page == "Calculator":
    st.header("Feeding calculator")
    species = st.radio("Species", list(species_labels), format_func=species_labels.get, horizontal=True)
    weight = st.number_input("Weight (kg)", min_value=0.1, value=4.0, step=0.1)
    age_months = st.number_input("Age (months)", min_value=0, value=24, step=1)
    activity = st.selectbox("Activity level", list(ACTIVITY_LEVELS), index=1)
    if st.button("Calculate"):
        profile = AnimalProfile(
            species=species,
            weight_kg=float(weight),
            age_months=int(age_months),
            activity=activity,
        )
        try:
            show_recommendation(compute_recommendation(profile, policy, locale))
        except FeedingValidationError as exc:
            st.error(exc.message)

if page == "My pet":
    st.header("My pet")
    name = st.text_input("Name", placeholder="e.g. Mochi")
    species = st.radio("Species", list(species_labels), format_func=species_labels.get, horizontal=True)
    breed = st.text_input("Breed")
    birthday = st.date_input("Birthday", value=date(date.today().year - 2, 1, 1), max_value=date.today())
    weight = st.number_input("Weight (kg)", min_value=0.0, value=4.0, step=0.1)
    if st.button("Get recommendation"):
        record = PetRecord(name=name, species=species, weight_kg=float(weight), birthday=birthday, breed=breed)
        try:
            show_recommendation(recommend_for_pet(record, policy=policy, locale=locale))
        except FeedingValidationError as exc:
            st.error(exc.message)

if page == "Feeding guide":
    st.header("Feeding guide")
    st.caption("Reference notes; calorie figures here are rules of thumb per lb and are not used by the calculator.")
    species = st.radio("Species", list(species_labels), format_func=species_labels.get, horizontal=True)
    for g in guides_for(species):
        with st.expander(f"{g.age_category.title()} ({g.age_range})"):
            st.write(f"**Meals:** {g.daily_meals} | **Timing:** {g.meal_timing}")
            st.write(f"**Calories:** {g.calories}")
            st.markdown("**Nutrition focus**")
            for item in g.nutrition_focus:
                st.write(f"- {item}")
            st.markdown("**Important notes**")
            for item in g.important_notes:
                st.write(f"- {item}")
