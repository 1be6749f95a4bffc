"""HTTP Controllers."""

from autocomplete.presentation.http.controllers.health import router as health_router
from autocomplete.presentation.http.controllers.screen import router as screen_router

__all__ = ["health_router", "screen_router"]
