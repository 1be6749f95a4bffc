"""Ad Form Application Layer."""

from autocomplete.application.screen import AdFormScreen
from autocomplete.application.suggestions import (
    LookupCoordinator,
    LookupResult,
    SuggestionCache,
)

__all__ = [
    "AdFormScreen",
    "LookupCoordinator",
    "LookupResult",
    "SuggestionCache",
]
