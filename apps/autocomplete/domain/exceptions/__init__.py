"""도메인 예외."""

from autocomplete.domain.exceptions.base import DomainError
from autocomplete.domain.exceptions.validation import (
    AdValidationError,
    TitleRequiredError,
    ValidLocationRequiredError,
)

__all__ = [
    "AdValidationError",
    "DomainError",
    "TitleRequiredError",
    "ValidLocationRequiredError",
]
