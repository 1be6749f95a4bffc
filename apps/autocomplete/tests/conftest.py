"""Test fixtures for autocomplete tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from autocomplete.application.ports.places_client import PlaceDTO
from autocomplete.application.suggestions.services import SuggestionCache


@pytest.fixture
def mock_places_client() -> AsyncMock:
    """PlacesClientPort mock."""
    client = AsyncMock()
    client.autocomplete = AsyncMock(return_value=[])
    client.close = AsyncMock()
    return client


@pytest.fixture
def sample_places() -> list[PlaceDTO]:
    """테스트용 장소 레코드 (main_text 없는 레코드 포함)."""
    return [
        PlaceDTO(place_id="ChIJ1", main_text="Athens", secondary_text="Greece"),
        PlaceDTO(place_id="ChIJ2", main_text=None, secondary_text="Greece"),
        PlaceDTO(place_id="ChIJ3", main_text="Athens Airport", secondary_text="Spata, Greece"),
    ]


@pytest.fixture
def cache() -> SuggestionCache:
    return SuggestionCache()


@pytest.fixture
def display() -> MagicMock:
    """on_suggestions_ready 콜백 mock."""
    return MagicMock()
