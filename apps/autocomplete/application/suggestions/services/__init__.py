"""Suggestion Services."""

from autocomplete.application.suggestions.services.lookup_coordinator import (
    DisplayCallback,
    LookupCoordinator,
)
from autocomplete.application.suggestions.services.suggestion_cache import (
    SuggestionCache,
)

__all__ = ["DisplayCallback", "LookupCoordinator", "SuggestionCache"]
