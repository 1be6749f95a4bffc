"""Location Suggestion Application Layer."""

from autocomplete.application.suggestions.dto import LookupResult
from autocomplete.application.suggestions.services import (
    LookupCoordinator,
    SuggestionCache,
)

__all__ = ["LookupCoordinator", "LookupResult", "SuggestionCache"]
