"""Application Ports."""

from autocomplete.application.ports.places_client import PlaceDTO, PlacesClientPort

__all__ = ["PlaceDTO", "PlacesClientPort"]
