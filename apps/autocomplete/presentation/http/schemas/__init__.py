"""HTTP Schemas."""

from autocomplete.presentation.http.schemas.screen import (
    FieldUpdate,
    ScreenState,
    SubmitResponse,
    SuggestionSelected,
)

__all__ = ["FieldUpdate", "ScreenState", "SubmitResponse", "SuggestionSelected"]
