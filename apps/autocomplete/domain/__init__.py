"""Ad Form Domain Layer."""

from autocomplete.domain.entities import AdForm
from autocomplete.domain.exceptions import (
    AdValidationError,
    DomainError,
    TitleRequiredError,
    ValidLocationRequiredError,
)

__all__ = [
    "AdForm",
    "AdValidationError",
    "DomainError",
    "TitleRequiredError",
    "ValidLocationRequiredError",
]
