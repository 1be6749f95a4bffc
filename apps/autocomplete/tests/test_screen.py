"""AdFormScreen 단위 테스트."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock

import pytest

from autocomplete.application.common.exceptions.screen import (
    SuggestionIndexError,
    UnknownFieldError,
)
from autocomplete.application.ports.places_client import PlaceDTO
from autocomplete.application.screen import AdFormScreen
from autocomplete.application.suggestions.services.lookup_coordinator import (
    DEFAULT_MIN_QUERY_LENGTH,
)
from autocomplete.domain.exceptions import TitleRequiredError, ValidLocationRequiredError

pytestmark = pytest.mark.asyncio


@pytest.fixture
def screen(mock_places_client: AsyncMock, sample_places: list[PlaceDTO]) -> AdFormScreen:
    mock_places_client.autocomplete.return_value = sample_places
    return AdFormScreen(places_client=mock_places_client)


async def _fill(screen: AdFormScreen, title: str = "Bike", select: int | None = 0) -> None:
    screen.set_field("title", title)
    screen.set_field("price", "120")
    screen.set_field("description", "Almost new")
    task = screen.set_field("location", "ath")
    if task is not None:
        await task
    if select is not None:
        screen.select_suggestion(select)


class TestSetField:
    """set_field 테스트."""

    async def test_non_location_field_has_no_lookup(
        self, screen: AdFormScreen, mock_places_client: AsyncMock
    ) -> None:
        assert screen.set_field("title", "Bike") is None
        assert screen.form.title == "Bike"
        mock_places_client.autocomplete.assert_not_called()

    async def test_location_triggers_lookup(self, screen: AdFormScreen) -> None:
        task = screen.set_field("location", "ath")
        assert task is not None
        await task

        assert screen.form.location == "ath"
        assert screen.displayed_suggestions == ["Athens", "Athens Airport"]

    async def test_short_location_clears_list(self, screen: AdFormScreen) -> None:
        await screen.set_field("location", "ath")
        assert screen.set_field("location", "at") is None
        assert screen.displayed_suggestions == []

    async def test_unknown_field(self, screen: AdFormScreen) -> None:
        with pytest.raises(UnknownFieldError):
            screen.set_field("category", "bikes")


class TestSelectSuggestion:
    """select_suggestion 테스트."""

    async def test_sets_location(
        self, screen: AdFormScreen, mock_places_client: AsyncMock
    ) -> None:
        await screen.set_field("location", "ath")

        assert screen.select_suggestion(1) == "Athens Airport"
        assert screen.form.location == "Athens Airport"
        assert mock_places_client.autocomplete.await_count == 1

    async def test_out_of_range(self, screen: AdFormScreen) -> None:
        with pytest.raises(SuggestionIndexError):
            screen.select_suggestion(0)

        await screen.set_field("location", "ath")
        with pytest.raises(SuggestionIndexError):
            screen.select_suggestion(2)
        with pytest.raises(SuggestionIndexError):
            screen.select_suggestion(-1)


class TestSubmit:
    """submit 테스트."""

    async def test_empty_title(self, screen: AdFormScreen) -> None:
        """제목 누락 시 JSON 없음, 필드 유지."""
        await _fill(screen, title="")

        with pytest.raises(TitleRequiredError):
            screen.submit()

        assert screen.form.location == "Athens"
        assert screen.form.price == "120"

    async def test_location_not_from_suggestions(self, screen: AdFormScreen) -> None:
        await _fill(screen, select=None)
        screen.form.location = "Thessaloniki"

        with pytest.raises(ValidLocationRequiredError):
            screen.submit()

        assert screen.form.title == "Bike"
        assert screen.form.location == "Thessaloniki"

    async def test_typed_query_is_not_a_valid_location(self, screen: AdFormScreen) -> None:
        """검색어를 그대로 두고 제출하면 무효."""
        await _fill(screen, select=None)

        with pytest.raises(ValidLocationRequiredError):
            screen.submit()

    async def test_success(self, screen: AdFormScreen) -> None:
        await _fill(screen)

        result = screen.submit()

        assert result.payload == {
            "title": "Bike",
            "location": "Athens",
            "price": "120",
            "description": "Almost new",
        }
        assert json.loads(result.json_text) == result.payload
        assert screen.form.to_payload() == {
            "title": "",
            "location": "",
            "price": "",
            "description": "",
        }

    async def test_typed_exact_suggestion_is_valid(self, screen: AdFormScreen) -> None:
        """선택 대신 제안과 동일하게 입력해도 유효."""
        await _fill(screen, select=None)
        await screen.set_field("location", "Athens")

        assert screen.submit().payload["location"] == "Athens"

    async def test_cache_survives_submit(self, screen: AdFormScreen) -> None:
        await _fill(screen)
        screen.submit()

        await _fill(screen)
        assert screen.submit().payload["location"] == "Athens"


class TestClear:
    """clear 테스트."""

    async def test_clear_all_fields(self, screen: AdFormScreen) -> None:
        await _fill(screen, title="")
        screen.clear()

        assert screen.form.to_payload() == {
            "title": "",
            "location": "",
            "price": "",
            "description": "",
        }


class TestClose:
    """aclose 테스트."""

    async def test_aclose_cancels_lookups(
        self, screen: AdFormScreen, mock_places_client: AsyncMock
    ) -> None:
        gate = asyncio.Event()

        async def slow_autocomplete(query: str) -> list[PlaceDTO]:
            await gate.wait()
            return [PlaceDTO(main_text="Athens")]

        mock_places_client.autocomplete.side_effect = slow_autocomplete
        task = screen.set_field("location", "ath")
        await asyncio.sleep(0)
        assert screen.coordinator.pending == {task}

        await screen.aclose()

        assert task.cancelled()
        assert screen.displayed_suggestions == []


class TestDefaults:
    """기본 설정 테스트."""

    async def test_default_min_query_length(
        self, screen: AdFormScreen, mock_places_client: AsyncMock
    ) -> None:
        short = "a" * (DEFAULT_MIN_QUERY_LENGTH - 1)
        assert screen.set_field("location", short) is None
        mock_places_client.autocomplete.assert_not_called()

        task = screen.set_field("location", "a" * DEFAULT_MIN_QUERY_LENGTH)
        assert task is not None
        await task
        mock_places_client.autocomplete.assert_awaited_once()
