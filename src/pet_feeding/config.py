from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .engine import POLICIES
from .tips import DEFAULT_LOCALE, LOCALES


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    policy: str = "default"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.locale not in LOCALES:
            raise ValueError(f"PET_FEEDING_LOCALE must be one of: {', '.join(LOCALES)}")
        if self.policy not in POLICIES:
            raise ValueError(f"PET_FEEDING_POLICY must be one of: {', '.join(POLICIES)}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"PET_FEEDING_LOG_LEVEL is not a logging level: {self.log_level}")


def load_settings() -> Settings:
    return Settings(
        locale=os.environ.get("PET_FEEDING_LOCALE", DEFAULT_LOCALE).strip().lower(),
        policy=os.environ.get("PET_FEEDING_POLICY", "default").strip().lower(),
        log_level=os.environ.get("PET_FEEDING_LOG_LEVEL", "INFO").strip().upper(),
    )
