"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging

from autocomplete.application.ports.places_client import PlacesClientPort
from autocomplete.application.screen import AdFormScreen
from autocomplete.infrastructure.integrations.places import PlacesHttpClient
from autocomplete.infrastructure.persistence_memory import InMemoryScreenRegistry
from autocomplete.setup.config import get_settings

logger = logging.getLogger(__name__)

_places_client: PlacesClientPort | None = None
_screen_registry: InMemoryScreenRegistry | None = None


def get_places_client() -> PlacesClientPort:
    """Places Client 싱글톤을 반환합니다."""
    global _places_client  # noqa: PLW0603
    if _places_client is None:
        settings = get_settings()
        _places_client = PlacesHttpClient(
            base_url=settings.places_api_url,
            timeout=settings.places_api_timeout,
        )
        logger.info("Places HTTP client created", extra={"base_url": settings.places_api_url})
    return _places_client


def create_screen() -> AdFormScreen:
    """설정값으로 새 화면을 만듭니다."""
    settings = get_settings()
    return AdFormScreen(
        places_client=get_places_client(),
        min_query_length=settings.min_query_length,
        cache_max_entries=settings.suggestion_cache_max_entries,
        discard_stale_responses=settings.discard_stale_responses,
    )


def get_screen_registry() -> InMemoryScreenRegistry:
    """Screen Registry 싱글톤을 반환합니다."""
    global _screen_registry  # noqa: PLW0603
    if _screen_registry is None:
        _screen_registry = InMemoryScreenRegistry(screen_factory=create_screen)
    return _screen_registry


async def shutdown_dependencies() -> None:
    """열린 화면과 HTTP 클라이언트를 정리합니다."""
    global _places_client, _screen_registry  # noqa: PLW0603
    if _screen_registry is not None:
        await _screen_registry.close_all()
        _screen_registry = None
    if _places_client is not None:
        await _places_client.close()
        _places_client = None
