from __future__ import annotations


class FeedingValidationError(ValueError):
    """Raised when a profile cannot produce a feeding recommendation.

    Attributes:
        field: name of the offending input field
        message: human-readable message, safe to show to the end user
    """

    kind = "invalid_input"
    field = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.kind, "field": self.field, "message": self.message}

    def __str__(self) -> str:
        return self.message


class InvalidName(FeedingValidationError):
    kind = "invalid_name"
    field = "name"

    def __init__(self, message: str = "Pet name cannot be empty") -> None:
        super().__init__(message)


class InvalidSpecies(FeedingValidationError):
    kind = "invalid_species"
    field = "species"

    def __init__(self, message: str = "Species must be one of: cat, dog") -> None:
        super().__init__(message)


class InvalidWeight(FeedingValidationError):
    kind = "invalid_weight"
    field = "weight_kg"

    def __init__(self, message: str = "weight_kg must be greater than 0") -> None:
        super().__init__(message)


class InvalidAge(FeedingValidationError):
    kind = "invalid_age"
    field = "age_months"

    def __init__(self, message: str = "age_months must be >= 0") -> None:
        super().__init__(message)
