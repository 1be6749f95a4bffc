"""Setup Module."""

from autocomplete.setup.config import Settings, get_settings
from autocomplete.setup.dependencies import get_places_client, get_screen_registry
from autocomplete.setup.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_places_client",
    "get_screen_registry",
    "setup_logging",
]
