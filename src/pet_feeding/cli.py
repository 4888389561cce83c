import json
from dataclasses import asdict
from datetime import datetime
from typing import Any, Optional

import typer

from .config import load_settings
from .engine import POLICIES, FeedingRecommendation, compute_recommendation, get_policy, recommend_for_pet
from .errors import FeedingValidationError
from .guide import all_guides, guides_for
from .logging_utils import get_logger, init_logging
from .models import ActivityLevel, AnimalProfile, PetRecord, parse_species
from .tips import LOCALES

app = typer.Typer(help="Pet feeding recommendations")
logger = get_logger(__name__)


@app.callback()
def main() -> None:
    try:
        settings = load_settings()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    init_logging(settings.log_level)


def _round_floats(value: Any) -> Any:
    if isinstance(value, float):
        return round(value, 2)
    if isinstance(value, dict):
        return {k: _round_floats(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_round_floats(v) for v in value]
    return value


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False))


def _echo_recommendation(recommendation: FeedingRecommendation) -> None:
    payload = _round_floats(recommendation.to_dict())
    payload["formatted_daily_amount"] = recommendation.formatted_daily_amount
    payload["formatted_meal_size"] = recommendation.formatted_meal_size
    _echo_json(payload)


def _fail(exc: FeedingValidationError) -> None:
    logger.warning("validation failed: %s (%s)", exc.message, exc.field)
    typer.echo(json.dumps(exc.to_dict(), ensure_ascii=False), err=True)
    raise typer.Exit(code=2)


def _resolve(policy: Optional[str], locale: Optional[str]):
    try:
        settings = load_settings()
        feeding_policy = get_policy(policy or settings.policy)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    tips_locale = (locale or settings.locale).strip().lower()
    if tips_locale not in LOCALES:
        raise typer.BadParameter(f"locale must be one of: {', '.join(LOCALES)}", param_hint="--locale")
    return feeding_policy, tips_locale


@app.command()
def recommend(
    species: str = typer.Option(..., help="cat or dog"),
    weight_kg: float = typer.Option(..., help="Body weight in kg"),
    age_months: int = typer.Option(..., help="Age in whole months"),
    activity: ActivityLevel = typer.Option(
        "normal",
        help="Activity level: low, normal, high",
        case_sensitive=False,
    ),
    policy: Optional[str] = typer.Option(None, help="Named policy: default, pet_profile, calculator"),
    locale: Optional[str] = typer.Option(None, help="Language of the nutrition tips: en, zh"),
) -> None:
    """Compute a feeding recommendation from species, weight and age."""
    feeding_policy, tips_locale = _resolve(policy, locale)
    profile = AnimalProfile(
        species=species,
        weight_kg=weight_kg,
        age_months=age_months,
        activity=activity,
    )
    try:
        recommendation = compute_recommendation(profile, feeding_policy, tips_locale)
    except FeedingValidationError as exc:
        _fail(exc)
    _echo_recommendation(recommendation)


@app.command()
def pet(
    name: str = typer.Option(..., help="Pet name"),
    species: str = typer.Option(..., help="cat or dog"),
    weight_kg: float = typer.Option(..., help="Body weight in kg"),
    birthday: datetime = typer.Option(..., formats=["%Y-%m-%d"], help="Birthday, YYYY-MM-DD"),
    today: Optional[datetime] = typer.Option(None, formats=["%Y-%m-%d"], help="Reference date, defaults to today"),
    activity: ActivityLevel = typer.Option(
        "normal",
        help="Activity level: low, normal, high",
        case_sensitive=False,
    ),
    policy: Optional[str] = typer.Option(None, help="Named policy: default, pet_profile, calculator"),
    locale: Optional[str] = typer.Option(None, help="Language of the nutrition tips: en, zh"),
) -> None:
    """Compute the full recommendation, with ideal weight range, for a pet record."""
    feeding_policy, tips_locale = _resolve(policy, locale)
    record = PetRecord(name=name, species=species, weight_kg=weight_kg, birthday=birthday.date())
    try:
        recommendation = recommend_for_pet(
            record,
            today=today.date() if today else None,
            policy=feeding_policy,
            activity=activity,
            locale=tips_locale,
        )
    except FeedingValidationError as exc:
        _fail(exc)
    _echo_recommendation(recommendation)


@app.command()
def guide(species: Optional[str] = typer.Option(None, help="Only show guides for cat or dog")) -> None:
    """Print the static feeding guide."""
    if species is None:
        guides = all_guides()
    else:
        try:
            guides = guides_for(parse_species(species))
        except FeedingValidationError as exc:
            _fail(exc)
    _echo_json([{**asdict(g), "age_range": g.age_range} for g in guides])


@app.command()
def policies() -> None:
    """List the named feeding policies."""
    _echo_json([asdict(p) for p in POLICIES.values()])


if __name__ == "__main__":
    app()
