"""Application Exceptions."""

from autocomplete.application.common.exceptions.base import ApplicationError
from autocomplete.application.common.exceptions.places import (
    PlacesClientError,
    PlacesResponseError,
    PlacesTransportError,
)
from autocomplete.application.common.exceptions.screen import (
    ScreenNotFoundError,
    SuggestionIndexError,
    UnknownFieldError,
)

__all__ = [
    "ApplicationError",
    "PlacesClientError",
    "PlacesResponseError",
    "PlacesTransportError",
    "ScreenNotFoundError",
    "SuggestionIndexError",
    "UnknownFieldError",
]
