"""Ad Form Infrastructure Layer."""

from autocomplete.infrastructure.integrations.places import PlacesHttpClient
from autocomplete.infrastructure.persistence_memory import InMemoryScreenRegistry

__all__ = ["InMemoryScreenRegistry", "PlacesHttpClient"]
