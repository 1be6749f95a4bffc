"""Domain Services."""

from autocomplete.domain.services.ad_form_validator import (
    AdFormValidator,
    SuggestionLookup,
)

__all__ = ["AdFormValidator", "SuggestionLookup"]
