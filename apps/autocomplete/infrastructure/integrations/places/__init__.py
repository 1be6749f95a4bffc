"""Places Autocomplete Integration."""

from autocomplete.infrastructure.integrations.places.places_client import (
    PlacesHttpClient,
)

__all__ = ["PlacesHttpClient"]
